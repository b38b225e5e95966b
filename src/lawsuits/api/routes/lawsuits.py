from flask import Blueprint, request, jsonify
from flasgger import swag_from
from pydantic import ValidationError

from lawsuits.api import dependencies, models, metrics
from lawsuits.api.extensions import limiter
from lawsuits.errors import BadRequestError, NotFoundError

lawsuits_bp = Blueprint('lawsuits', __name__)

_CURSOR_EXAMPLE = 'eyJpZCI6IjAwMDAwMDEtMjMuMjAyMy44LjI2LjAxMDAifQ=='


@lawsuits_bp.route("/api/lawsuits", methods=["GET"])
@limiter.limit("120/minute")
@swag_from({
    'tags': ['lawsuits'],
    'summary': 'List lawsuits',
    'parameters': [
        {'name': 'q', 'in': 'query', 'type': 'string', 'maxLength': 200, 'required': False,
         'description': 'Text search over case number, tribunal, parties, classes and subjects. '
                        'A value like "G2" filters by current degree instead.'},
        {'name': 'tribunal', 'in': 'query', 'type': 'string', 'maxLength': 20, 'required': False},
        {'name': 'grau', 'in': 'query', 'type': 'string', 'maxLength': 10, 'required': False},
        {'name': 'cursor', 'in': 'query', 'type': 'string', 'required': False},
        {'name': 'limit', 'in': 'query', 'type': 'integer', 'minimum': 1, 'maximum': 100,
         'default': 20, 'required': False},
    ],
    'responses': {
        200: {'description': 'Paginated list of lawsuits',
              'examples': {'application/json': {'items': [], 'nextCursor': _CURSOR_EXAMPLE}}},
        400: {'description': 'Invalid query parameters'},
    }
})
def list_lawsuits():
    try:
        query = models.ListLawsuitsQuery(**request.args.to_dict())
    except ValidationError as ve:
        raise BadRequestError(dependencies.validation_message(ve))

    page = dependencies.get_service().find_all(
        q=query.q,
        tribunal=query.tribunal,
        grau=query.grau,
        cursor=query.cursor,
        limit=query.limit,
    )
    metrics.LIST_RESULTS.observe(len(page.items))
    return jsonify(page.to_dict(lambda item: item.to_dict()))


@lawsuits_bp.route("/api/lawsuits/<case_number>", methods=["GET"])
@limiter.limit("120/minute")
@swag_from({
    'tags': ['lawsuits'],
    'summary': 'Get lawsuit details',
    'parameters': [
        {'name': 'case_number', 'in': 'path', 'type': 'string', 'required': True,
         'description': 'Case number', 'default': '0000001-23.2023.8.26.0100'},
    ],
    'responses': {
        200: {'description': 'Lawsuit details'},
        404: {'description': 'Lawsuit not found'},
    }
})
def get_lawsuit(case_number: str):
    try:
        detail = dependencies.get_service().find_by_case_number(case_number)
    except NotFoundError:
        metrics.DETAIL_LOOKUPS.labels('not_found').inc()
        raise
    metrics.DETAIL_LOOKUPS.labels('found').inc()
    return jsonify(detail.to_dict())
