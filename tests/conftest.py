import os
import sys

# Ensure the `src/` directory is on sys.path so we can import `lawsuits` package
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import pytest  # noqa: E402

from lawsuits.ingest.schemas import LawsuitRaw, ProceedingRaw  # noqa: E402
from lawsuits.repository import LawsuitRepository  # noqa: E402
from lawsuits.service import LawsuitService  # noqa: E402

SCENARIO_NUMBER = "0000001-23.2023.8.26.0100"


def proceeding_dict(grau="G1", ativo=True, distribuicao=None, **extra):
    """Raw proceeding dict; a bare string ``grau`` becomes the structured form."""
    if isinstance(grau, str) and grau.upper().startswith("G") and grau[1:].isdigit():
        grau = {"sigla": grau, "nome": f"{grau[1:]}º Grau", "numero": int(grau[1:])}
    data = {"grau": grau, "ativo": ativo}
    if distribuicao is not None:
        data["dataHoraUltimaDistribuicao"] = distribuicao
    data.update(extra)
    return data


def lawsuit_dict(numero, tramitacoes, tribunal="TJSP", sigilo=0):
    return {
        "numeroProcesso": numero,
        "siglaTribunal": tribunal,
        "nivelSigilo": sigilo,
        "tramitacoes": tramitacoes,
    }


@pytest.fixture
def make_proceeding():
    def _make(grau="G1", ativo=True, distribuicao=None, **extra):
        return ProceedingRaw.model_validate(proceeding_dict(grau, ativo, distribuicao, **extra))
    return _make


@pytest.fixture
def make_lawsuit():
    def _make(numero="0000099-00.2024.8.26.0100", tramitacoes=None, tribunal="TJSP", sigilo=0):
        if tramitacoes is None:
            tramitacoes = [proceeding_dict()]
        return LawsuitRaw.model_validate(lawsuit_dict(numero, tramitacoes, tribunal, sigilo))
    return _make


def _party(polo, nome, **extra):
    return {"polo": polo, "nome": nome, **extra}


@pytest.fixture
def dataset():
    raw = [
        lawsuit_dict(SCENARIO_NUMBER, [
            proceeding_dict(
                "G1", ativo=False, distribuicao="2023-01-15T08:00:00Z",
                classe=[{"codigo": 7, "descricao": "Procedimento Comum Cível"}],
                assunto=[{"codigo": 7619, "descricao": "Cobrança"}],
                orgaoJulgador={"id": 1, "nome": "1ª Vara Cível"},
                partes=[
                    _party("ATIVO", "João Silva", tipoParte="AUTOR",
                           representantes=[{"nome": "Ana Souza", "tipoRepresentacao": "ADVOGADO"}]),
                    _party("PASSIVO", "Empresa XYZ Ltda", tipoPessoa="JURIDICA"),
                ],
            ),
            proceeding_dict(
                "G2", ativo=True, distribuicao="2023-07-01T09:30:00Z",
                classe=[{"codigo": 198, "descricao": "Apelação Cível"}],
                assunto=[{"codigo": 7619, "descricao": "Cobrança"}],
                orgaoJulgador={"id": 2, "nome": "12ª Câmara de Direito Privado"},
                ultimoMovimento={
                    "dataHora": "2024-01-01T10:00:00Z",
                    "descricao": "Conclusos para julgamento",
                    "codigo": 11009,
                    "orgaoJulgador": [{"id": 22, "nome": " Gabinete do Relator "}],
                },
            ),
        ]),
        lawsuit_dict("0000002-45.2022.8.19.0001", [
            proceeding_dict(
                "G1", ativo=True, distribuicao="2022-03-02T11:00:00Z",
                classe=[{"descricao": "Procedimento do Juizado Especial Cível"}],
                assunto=[{"descricao": "Indenização por Dano Moral"}],
                partes=[_party("ATIVO", "Maria Santos"), _party("PASSIVO", "Banco Exemplo S.A.")],
            ),
        ], tribunal="TJRJ"),
        lawsuit_dict("0000003-67.2021.5.02.0003", [
            proceeding_dict(
                "G1", ativo=True, distribuicao="2021-05-20T13:00:00Z",
                classe=[{"descricao": "Ação Trabalhista - Rito Ordinário"}],
                assunto=[{"descricao": "Horas Extras"}],
                partes=[_party("ATIVO", "Carlos Pereira"), _party("PASSIVO", "Indústria ABC S.A.")],
            ),
            proceeding_dict("G3", ativo=True, classe=[{"descricao": "Recurso de Revista"}]),
        ], tribunal="TRT2"),
        lawsuit_dict("0000004-89.2020.4.03.6100", [
            proceeding_dict(
                "G3", ativo=True, distribuicao="2024-02-10T10:00:00Z",
                classe=[{"descricao": "Recurso Especial"}],
                assunto=[{"descricao": "Contribuições Previdenciárias"}],
                partes=[_party("ATIVO", "União Federal"), _party("PASSIVO", "Comércio Delta Ltda")],
            ),
        ], tribunal="TRF3"),
        lawsuit_dict("0000005-12.2023.8.26.0224", [
            proceeding_dict("G1", ativo=False, partes=[_party("PASSIVO", "José Oliveira")]),
        ]),
        lawsuit_dict("LEGADO-G3-0006", [
            proceeding_dict("G1", ativo=True, distribuicao="2020-01-01T00:00:00Z",
                            classe=[{"descricao": "Execução Fiscal"}]),
        ], tribunal="TJMG"),
    ]
    return tuple(LawsuitRaw.model_validate(r) for r in raw)


@pytest.fixture
def repository(dataset):
    return LawsuitRepository(dataset)


@pytest.fixture
def service(repository):
    return LawsuitService(repository)


@pytest.fixture
def app(repository):
    from lawsuits.api.server import create_app
    return create_app(repository=repository, testing=True)
