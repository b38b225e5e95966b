import json
import os

import pytest

from conftest import PROJECT_ROOT, lawsuit_dict, proceeding_dict
from lawsuits.errors import DatasetLoadError
from lawsuits.ingest.loader import load_dataset, parse_document


def _write(tmp_path, payload):
    path = tmp_path / "lawsuits.json"
    path.write_text(payload if isinstance(payload, str) else json.dumps(payload), encoding="utf-8")
    return str(path)


def test_missing_file(tmp_path):
    with pytest.raises(DatasetLoadError, match="Error loading JSON file"):
        load_dataset(str(tmp_path / "absent.json"))


def test_invalid_json(tmp_path):
    with pytest.raises(DatasetLoadError):
        load_dataset(_write(tmp_path, "{not json"))


def test_top_level_must_be_object(tmp_path):
    with pytest.raises(DatasetLoadError, match="expected a JSON object"):
        load_dataset(_write(tmp_path, [1, 2, 3]))


def test_case_without_proceedings_is_rejected(tmp_path):
    doc = {"content": [lawsuit_dict("X-1", [])]}
    with pytest.raises(DatasetLoadError, match="tramitacoes"):
        load_dataset(_write(tmp_path, doc))


def test_case_without_number_is_rejected():
    with pytest.raises(DatasetLoadError):
        parse_document({"content": [lawsuit_dict("  ", [proceeding_dict()])]})


def test_missing_content_loads_nothing(caplog):
    assert parse_document({}) == ()
    assert "no 'content'" in caplog.text


def test_valid_document(tmp_path):
    doc = {"content": [
        lawsuit_dict("A-1", [proceeding_dict("G1", distribuicao="2024-01-01T00:00:00Z")]),
        lawsuit_dict("B-2", [proceeding_dict("G2")], tribunal="TRF1", sigilo=2),
    ]}
    records = load_dataset(_write(tmp_path, doc))
    assert [r.numero_processo for r in records] == ["A-1", "B-2"]
    assert records[1].nivel_sigilo == 2
    assert records[1].tramitacoes[0].grau.numero == 2


def test_legacy_and_null_fields(tmp_path):
    doc = {"content": [lawsuit_dict("L-1", [
        {"grau": "g2", "ativo": True, "classe": None, "partes": None, "ultimoMovimento": None},
    ])]}
    proceeding = load_dataset(_write(tmp_path, doc))[0].tramitacoes[0]
    assert proceeding.grau.sigla == "g2"
    assert proceeding.grau.numero == 2
    assert proceeding.classe == ()
    assert proceeding.partes == ()
    assert proceeding.ultimo_movimento is None


def test_unknown_keys_are_ignored():
    records = parse_document({"content": [
        dict(lawsuit_dict("U-1", [proceeding_dict(extraField=1)]), dataHoraAtualizacao="x"),
    ]})
    assert records[0].numero_processo == "U-1"


def test_duplicate_case_number_is_rejected(tmp_path):
    doc = {"content": [
        lawsuit_dict("D-1", [proceeding_dict("G1")]),
        lawsuit_dict("D-1", [proceeding_dict("G2")]),
        lawsuit_dict("D-2", [proceeding_dict()]),
    ]}
    with pytest.raises(DatasetLoadError, match="duplicate case number D-1 at positions 0 and 1"):
        load_dataset(_write(tmp_path, doc))


def test_bundled_sample_dataset_loads():
    records = load_dataset(os.path.join(PROJECT_ROOT, "data", "lawsuits.json"))
    assert len(records) == 5
    assert all(r.tramitacoes for r in records)
