from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, ClassVar, Dict, List, Optional, Type, TypeVar, Union

from .utils import camel_to_snake

R = TypeVar("R", bound="Record")


# ----------------------------------- Envelope --------------------------------------#

@dataclass
class NavigationLink:
    rel: str                       # first | last | next | self
    href: Optional[str] = None


@dataclass
class Page:
    data: Union[Dict[str, Any], List[Any]]
    links: List[NavigationLink] = field(default_factory=list)
    url: Optional[str] = None


# ----------------------------------- Records ---------------------------------------#

@dataclass
class Record:
    """
    Base for every typed result.

    Wire keys are mapped from camelCase to the snake_case fields declared on the
    subclass; everything is also kept untouched in ``raw``. Keys listed in
    ``_nested`` are converted into the given record type (dicts, or lists of dicts).
    """

    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    _nested: ClassVar[Dict[str, Type["Record"]]] = {}

    @classmethod
    def from_api(cls: Type[R], data: Optional[Dict[str, Any]]) -> R:
        data = data or {}
        names = {f.name for f in fields(cls)} - {"raw"}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = camel_to_snake(key)
            if name not in names:
                continue
            nested = cls._nested.get(name)
            if nested is not None:
                value = _convert_nested(nested, value)
            kwargs[name] = value
        return cls(raw=data, **kwargs)


def _convert_nested(record_cls: Type[Record], value: Any) -> Any:
    if isinstance(value, dict):
        return record_cls.from_api(value)
    if isinstance(value, list):
        return [record_cls.from_api(v) if isinstance(v, dict) else v for v in value]
    return value


# Blocs -------------------------------------------------------------------------------

@dataclass
class Bloc(Record):
    id: Optional[str] = None
    nome: Optional[str] = None              # acronyms of the member parties
    id_legislatura: Optional[str] = None
    uri: Optional[str] = None


# Legislators -------------------------------------------------------------------------

@dataclass
class Legislator(Record):
    id: Optional[int] = None
    uri: Optional[str] = None
    nome: Optional[str] = None
    sigla_partido: Optional[str] = None
    uri_partido: Optional[str] = None
    sigla_uf: Optional[str] = None
    id_legislatura: Optional[int] = None
    url_foto: Optional[str] = None
    email: Optional[str] = None


@dataclass
class LegislatorStatus(Legislator):
    condicao_eleitoral: Optional[str] = None
    data: Optional[str] = None
    descricao_status: Optional[str] = None   # empty string or None when absent
    gabinete: Optional[Dict[str, Any]] = None
    nome_eleitoral: Optional[str] = None
    situacao: Optional[str] = None


@dataclass
class LegislatorDetail(Record):
    id: Optional[int] = None
    uri: Optional[str] = None
    cpf: Optional[str] = None
    nome_civil: Optional[str] = None
    sexo: Optional[str] = None
    data_nascimento: Optional[str] = None
    data_falecimento: Optional[str] = None
    municipio_nascimento: Optional[str] = None
    uf_nascimento: Optional[str] = None
    escolaridade: Optional[str] = None
    rede_social: List[str] = field(default_factory=list)
    url_website: Optional[str] = None
    ultimo_status: Optional[LegislatorStatus] = None

    _nested: ClassVar[Dict[str, Type[Record]]] = {"ultimo_status": LegislatorStatus}


@dataclass
class Expense(Record):
    ano: Optional[int] = None
    mes: Optional[int] = None
    tipo_despesa: Optional[str] = None
    cod_documento: Optional[int] = None
    tipo_documento: Optional[str] = None
    cod_tipo_documento: Optional[int] = None
    data_documento: Optional[str] = None
    num_documento: Optional[str] = None
    valor_documento: Optional[float] = None
    url_documento: Optional[str] = None
    nome_fornecedor: Optional[str] = None
    cnpj_cpf_fornecedor: Optional[str] = None
    valor_liquido: Optional[float] = None
    valor_glosa: Optional[float] = None
    num_ressarcimento: Optional[str] = None
    cod_lote: Optional[int] = None
    parcela: Optional[int] = None


@dataclass
class Speech(Record):
    data_hora_inicio: Optional[str] = None
    data_hora_fim: Optional[str] = None
    fase_evento: Optional[Dict[str, Any]] = None
    tipo_discurso: Optional[str] = None
    keywords: Optional[str] = None
    sumario: Optional[str] = None
    transcricao: Optional[str] = None
    uri_evento: Optional[str] = None
    url_audio: Optional[str] = None
    url_texto: Optional[str] = None
    url_video: Optional[str] = None


@dataclass
class Occupation(Record):
    titulo: Optional[str] = None
    entidade: Optional[str] = None
    entidade_uf: Optional[str] = None
    entidade_pais: Optional[str] = None
    ano_inicio: Optional[int] = None
    ano_fim: Optional[int] = None


@dataclass
class Profession(Record):
    data_hora: Optional[str] = None
    cod_tipo_profissao: Optional[int] = None
    titulo: Optional[str] = None


@dataclass
class LegislatorBody(Record):
    """A committee or other body the legislator belongs to."""
    id_orgao: Optional[int] = None
    uri_orgao: Optional[str] = None
    sigla_orgao: Optional[str] = None
    nome_orgao: Optional[str] = None
    nome_publicacao: Optional[str] = None
    titulo: Optional[str] = None
    cod_titulo: Optional[str] = None
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None


# Bodies (committees and other organs) ------------------------------------------------

@dataclass
class Body(Record):
    id: Optional[int] = None
    uri: Optional[str] = None
    sigla: Optional[str] = None
    nome: Optional[str] = None
    apelido: Optional[str] = None
    cod_tipo_orgao: Optional[int] = None
    tipo_orgao: Optional[str] = None
    nome_publicacao: Optional[str] = None
    nome_resumido: Optional[str] = None


@dataclass
class BodyDetail(Body):
    data_inicio: Optional[str] = None
    data_instalacao: Optional[str] = None
    data_fim: Optional[str] = None
    data_fim_original: Optional[str] = None
    casa: Optional[str] = None
    sala: Optional[str] = None
    url_website: Optional[str] = None


@dataclass
class BodyMember(Legislator):
    titulo: Optional[str] = None
    cod_titulo: Optional[int] = None
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None


# Events -------------------------------------------------------------------------------

@dataclass
class Event(Record):
    id: Optional[int] = None
    uri: Optional[str] = None
    data_hora_inicio: Optional[str] = None
    data_hora_fim: Optional[str] = None
    situacao: Optional[str] = None
    descricao_tipo: Optional[str] = None
    descricao: Optional[str] = None
    local_externo: Optional[str] = None
    local_camara: Optional[Dict[str, Any]] = None
    orgaos: List[Body] = field(default_factory=list)
    url_registro: Optional[str] = None

    _nested: ClassVar[Dict[str, Type[Record]]] = {"orgaos": Body}


@dataclass
class EventDetail(Event):
    uri_deputados: Optional[str] = None
    uri_convidados: Optional[str] = None
    fases: Optional[Any] = None
    requerimentos: List[Dict[str, Any]] = field(default_factory=list)
    url_documento_pauta: Optional[str] = None


# Bills --------------------------------------------------------------------------------

@dataclass
class Bill(Record):
    id: Optional[int] = None
    uri: Optional[str] = None
    sigla_tipo: Optional[str] = None
    cod_tipo: Optional[int] = None
    numero: Optional[int] = None
    ano: Optional[int] = None
    ementa: Optional[str] = None


@dataclass
class RelatedBill(Record):
    """``cod_tipo``, ``numero`` and ``ano`` arrive as strings on this resource."""
    id: Optional[int] = None
    uri: Optional[str] = None
    sigla_tipo: Optional[str] = None
    cod_tipo: Optional[str] = None
    numero: Optional[str] = None
    ano: Optional[str] = None
    ementa: Optional[str] = None


@dataclass
class BillProceeding(Record):
    data_hora: Optional[str] = None
    sequencia: Optional[int] = None
    sigla_orgao: Optional[str] = None
    uri_orgao: Optional[str] = None
    uri_ultimo_relator: Optional[str] = None
    regime: Optional[str] = None
    descricao_tramitacao: Optional[str] = None
    cod_tipo_tramitacao: Optional[str] = None
    descricao_situacao: Optional[str] = None
    cod_situacao: Optional[int] = None
    despacho: Optional[str] = None
    url: Optional[str] = None
    ambito: Optional[str] = None


@dataclass
class BillDetail(Bill):
    data_apresentacao: Optional[str] = None
    descricao_tipo: Optional[str] = None
    ementa_detalhada: Optional[str] = None
    keywords: Optional[str] = None
    status_proposicao: Optional[BillProceeding] = None
    uri_orgao_numerador: Optional[str] = None
    uri_autores: Optional[str] = None
    uri_prop_principal: Optional[str] = None
    uri_prop_anterior: Optional[str] = None
    uri_prop_posterior: Optional[str] = None
    url_inteiro_teor: Optional[str] = None
    urn_final: Optional[str] = None
    texto: Optional[str] = None
    justificativa: Optional[str] = None

    _nested: ClassVar[Dict[str, Type[Record]]] = {"status_proposicao": BillProceeding}


@dataclass
class BillAuthor(Record):
    uri: Optional[str] = None             # a legislator or a body, not resolved
    nome: Optional[str] = None
    cod_tipo: Optional[int] = None
    tipo: Optional[str] = None
    ordem_assinatura: Optional[int] = None
    proponente: Optional[int] = None


@dataclass
class BillTheme(Record):
    cod_tema: Optional[int] = None
    tema: Optional[str] = None
    relevancia: Optional[int] = None


@dataclass
class AgendaItem(Record):
    ordem: Optional[int] = None
    topico: Optional[str] = None
    regime: Optional[str] = None
    cod_regime: Optional[int] = None
    titulo: Optional[str] = None
    proposicao: Optional[Bill] = None
    relator: Optional[Legislator] = None
    texto_parecer: Optional[str] = None
    proposicao_relacionada: Optional[RelatedBill] = None
    uri_votacao: Optional[str] = None
    situacao_item: Optional[str] = None

    _nested: ClassVar[Dict[str, Type[Record]]] = {
        "proposicao": Bill,
        "relator": Legislator,
        "proposicao_relacionada": RelatedBill,
    }


# Votes --------------------------------------------------------------------------------

@dataclass
class Vote(Record):
    id: Optional[str] = None
    uri: Optional[str] = None
    data: Optional[str] = None
    data_hora_registro: Optional[str] = None
    sigla_orgao: Optional[str] = None
    uri_orgao: Optional[str] = None
    uri_evento: Optional[str] = None
    proposicao_objeto: Optional[str] = None
    uri_proposicao_objeto: Optional[str] = None
    descricao: Optional[str] = None
    aprovacao: Optional[int] = None


@dataclass
class VoteDetail(Vote):
    id_orgao: Optional[int] = None
    id_evento: Optional[int] = None
    desc_ultima_abertura_votacao: Optional[str] = None
    data_hora_ultima_abertura_votacao: Optional[str] = None
    ultima_apresentacao_proposicao: Optional[Dict[str, Any]] = None
    efeitos_registrados: List[Dict[str, Any]] = field(default_factory=list)
    objetos_possiveis: List[Bill] = field(default_factory=list)
    proposicoes_afetadas: List[Bill] = field(default_factory=list)

    _nested: ClassVar[Dict[str, Type[Record]]] = {
        "objetos_possiveis": Bill,
        "proposicoes_afetadas": Bill,
    }


@dataclass
class VoteOrientation(Record):
    orientacao_voto: Optional[str] = None
    cod_tipo_lideranca: Optional[str] = None
    sigla_partido_bloco: Optional[str] = None
    cod_partido_bloco: Optional[int] = None
    uri_partido_bloco: Optional[str] = None


@dataclass
class Ballot(Record):
    """A single legislator's vote."""
    data_registro_voto: Optional[str] = None
    tipo_voto: Optional[str] = None
    deputado: Optional[Legislator] = None

    _nested: ClassVar[Dict[str, Type[Record]]] = {"deputado": Legislator}


# Fronts -------------------------------------------------------------------------------

@dataclass
class Front(Record):
    id: Optional[int] = None
    uri: Optional[str] = None
    titulo: Optional[str] = None
    id_legislatura: Optional[int] = None


@dataclass
class FrontDetail(Front):
    telefone: Optional[str] = None
    email: Optional[str] = None
    keywords: Optional[str] = None
    id_situacao: Optional[int] = None
    situacao: Optional[str] = None
    url_website: Optional[str] = None
    url_documento: Optional[str] = None
    coordenador: Optional[Legislator] = None

    _nested: ClassVar[Dict[str, Type[Record]]] = {"coordenador": Legislator}


@dataclass
class FrontMember(BodyMember):
    pass


# Legislatures -------------------------------------------------------------------------

@dataclass
class Legislature(Record):
    id: Optional[int] = None
    uri: Optional[str] = None
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None


@dataclass
class LegislatureLeader(Record):
    parlamentar: Optional[Legislator] = None
    titulo: Optional[str] = None
    data_inicio: Optional[str] = None
    data_fim: Optional[str] = None

    _nested: ClassVar[Dict[str, Type[Record]]] = {"parlamentar": Legislator}


@dataclass
class BoardMember(BodyMember):
    """Member of the legislature's directing board (Mesa)."""
    cod_titulo: Optional[str] = None


# Parties ------------------------------------------------------------------------------

@dataclass
class Party(Record):
    id: Optional[int] = None
    sigla: Optional[str] = None
    nome: Optional[str] = None
    uri: Optional[str] = None


@dataclass
class PartyDetail(Party):
    status: Optional[Dict[str, Any]] = None    # includes leader and member counts
    numero_eleitoral: Optional[int] = None
    url_logo: Optional[str] = None
    url_web_site: Optional[str] = None
    url_facebook: Optional[str] = None


@dataclass
class PartyLeader(BodyMember):
    pass
