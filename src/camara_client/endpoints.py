"""
Static catalog of the Câmara open-data resources.

Every operation is described by an ``Endpoint``: its path, the options it accepts
and their kinds, its page size and the record type it returns. The client engine
reads these descriptors; nothing here performs I/O.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Type

from .models import (AgendaItem, Ballot, Bill, BillAuthor, BillDetail,
                     BillProceeding, BillTheme, Bloc, BoardMember, Body,
                     BodyDetail, BodyMember, Event, EventDetail, Expense,
                     Front, FrontDetail, FrontMember, Legislator,
                     LegislatorBody, LegislatorDetail, Legislature,
                     LegislatureLeader, Occupation, Party, PartyDetail,
                     PartyLeader, Profession, Record, RelatedBill, Speech,
                     Vote, VoteDetail, VoteOrientation)
from .query import OptionKind

INT = OptionKind.INTEGER
INTS = OptionKind.INTEGER_LIST
STR = OptionKind.STRING
STRS = OptionKind.STRING_LIST
DATE = OptionKind.DATE
TIME = OptionKind.TIME
BOOL = OptionKind.BOOLEAN

PAGE_SIZE = 100


@dataclass(frozen=True)
class Endpoint:
    path: str                                   # relative to the API root, may hold "{id}"
    model: Type[Record]
    options: Mapping[str, OptionKind] = field(default_factory=lambda: MappingProxyType({}))
    many: bool = True
    page_size: Optional[int] = None             # sent as the "itens" parameter
    string_id: bool = False
    drop_next_params: Tuple[str, ...] = ()      # stripped from "next" hrefs


def _schema(*groups: Mapping[str, OptionKind], **extra: OptionKind) -> Mapping[str, OptionKind]:
    merged = {}
    for group in groups:
        merged.update(group)
    merged.update(extra)
    return MappingProxyType(merged)


# Option groups shared by most resources
PERIOD = {"dataInicio": DATE, "dataFim": DATE}
ORDERING = {"ordem": STR, "ordenarPor": STR}
LEGISLATURE = {"idLegislatura": INTS}


# ----------------------------------- blocos ----------------------------------------#

BLOCS = Endpoint(
    "blocos", Bloc, _schema(ORDERING, LEGISLATURE, id=INTS), page_size=PAGE_SIZE)
BLOC = Endpoint("blocos/{id}", Bloc, many=False)


# ----------------------------------- deputados -------------------------------------#

LEGISLATORS = Endpoint(
    "deputados", Legislator,
    _schema(PERIOD, ORDERING, LEGISLATURE,
            id=INTS, nome=STR, siglaPartido=STRS, siglaSexo=STR, siglaUf=STRS),
    page_size=PAGE_SIZE)
LEGISLATOR = Endpoint("deputados/{id}", LegislatorDetail, many=False)
LEGISLATOR_EXPENSES = Endpoint(
    "deputados/{id}/despesas", Expense,
    _schema(ORDERING, LEGISLATURE, ano=INTS, mes=INTS, cnpjCpfFornecedor=STR),
    page_size=PAGE_SIZE)
LEGISLATOR_SPEECHES = Endpoint(
    "deputados/{id}/discursos", Speech, _schema(PERIOD, ORDERING, LEGISLATURE),
    page_size=PAGE_SIZE)
LEGISLATOR_EVENTS = Endpoint(
    "deputados/{id}/eventos", Event, _schema(PERIOD, ORDERING), page_size=PAGE_SIZE)
LEGISLATOR_FRONTS = Endpoint("deputados/{id}/frentes", Front)
LEGISLATOR_OCCUPATIONS = Endpoint("deputados/{id}/ocupacoes", Occupation)
LEGISLATOR_BODIES = Endpoint(
    "deputados/{id}/orgaos", LegislatorBody, _schema(PERIOD, ORDERING), page_size=PAGE_SIZE)
LEGISLATOR_PROFESSIONS = Endpoint("deputados/{id}/profissoes", Profession)


# ----------------------------------- eventos ---------------------------------------#

EVENTS = Endpoint(
    "eventos", Event,
    _schema(PERIOD, ORDERING,
            id=INTS, codTipoEvento=INTS, codSituacao=INTS, codTipoOrgao=INTS, idOrgao=INTS,
            horaInicio=TIME, horaFim=TIME),
    page_size=PAGE_SIZE)
EVENT = Endpoint("eventos/{id}", EventDetail, many=False)
EVENT_LEGISLATORS = Endpoint("eventos/{id}/deputados", Legislator)
EVENT_BODIES = Endpoint("eventos/{id}/orgaos", Body)
EVENT_AGENDA = Endpoint("eventos/{id}/pauta", AgendaItem)
EVENT_VOTES = Endpoint("eventos/{id}/votacoes", Vote)


# ----------------------------------- frentes ---------------------------------------#

# The service adds "itens=1000" to its own next links and then rejects them.
FRONTS = Endpoint("frentes", Front, _schema(LEGISLATURE), drop_next_params=("itens",))
FRONT = Endpoint("frentes/{id}", FrontDetail, many=False)
FRONT_MEMBERS = Endpoint("frentes/{id}/membros", FrontMember)


# ----------------------------------- legislaturas ----------------------------------#

LEGISLATURES = Endpoint(
    "legislaturas", Legislature, _schema(PERIOD, ORDERING, id=INTS, data=DATE),
    page_size=PAGE_SIZE)
LEGISLATURE_ONE = Endpoint("legislaturas/{id}", Legislature, many=False)
LEGISLATURE_LEADERS = Endpoint(
    "legislaturas/{id}/lideres", LegislatureLeader, page_size=PAGE_SIZE)
LEGISLATURE_BOARD = Endpoint("legislaturas/{id}/mesa", BoardMember, _schema(PERIOD))


# ----------------------------------- orgaos ----------------------------------------#

BODIES = Endpoint(
    "orgaos", Body, _schema(PERIOD, ORDERING, id=INTS, codTipoOrgao=INTS, sigla=STRS),
    page_size=PAGE_SIZE)
BODY = Endpoint("orgaos/{id}", BodyDetail, many=False)
BODY_EVENTS = Endpoint(
    "orgaos/{id}/eventos", Event, _schema(PERIOD, ORDERING, idTipoEvento=INTS),
    page_size=PAGE_SIZE)
BODY_MEMBERS = Endpoint(
    "orgaos/{id}/membros", BodyMember, _schema(PERIOD), page_size=PAGE_SIZE)
BODY_VOTES = Endpoint(
    "orgaos/{id}/votacoes", Vote, _schema(PERIOD, ORDERING, idProposicao=INTS),
    page_size=200)


# ----------------------------------- partidos --------------------------------------#

PARTIES = Endpoint(
    "partidos", Party, _schema(PERIOD, ORDERING, LEGISLATURE, sigla=STRS),
    page_size=PAGE_SIZE)
PARTY = Endpoint("partidos/{id}", PartyDetail, many=False)
PARTY_LEADERS = Endpoint("partidos/{id}/lideres", PartyLeader, page_size=PAGE_SIZE)
PARTY_MEMBERS = Endpoint(
    "partidos/{id}/membros", Legislator, _schema(PERIOD, ORDERING, LEGISLATURE),
    page_size=PAGE_SIZE)


# ----------------------------------- proposicoes -----------------------------------#

BILLS = Endpoint(
    "proposicoes", Bill,
    _schema(PERIOD, ORDERING,
            id=INTS, siglaTipo=STRS, numero=INTS, ano=INTS,
            idDeputadoAutor=INTS, autor=STR, siglaPartidoAutor=STRS, idPartidoAutor=INT,
            siglaUfAutor=STRS, keywords=STRS, tramitacaoSenado=BOOL,
            dataApresentacaoInicio=DATE, dataApresentacaoFim=DATE,
            codSituacao=INTS, codTema=INTS),
    page_size=PAGE_SIZE)
BILL = Endpoint("proposicoes/{id}", BillDetail, many=False)
BILL_AUTHORS = Endpoint("proposicoes/{id}/autores", BillAuthor)
BILL_RELATED = Endpoint("proposicoes/{id}/relacionadas", RelatedBill)
BILL_THEMES = Endpoint("proposicoes/{id}/temas", BillTheme)
BILL_PROCEEDINGS = Endpoint("proposicoes/{id}/tramitacoes", BillProceeding, _schema(PERIOD))
BILL_VOTES = Endpoint("proposicoes/{id}/votacoes", Vote, _schema(ORDERING))


# ----------------------------------- votacoes --------------------------------------#

VOTES = Endpoint(
    "votacoes", Vote,
    _schema(PERIOD, ORDERING, id=STRS, idProposicao=INTS, idEvento=INTS, idOrgao=INTS),
    page_size=PAGE_SIZE)
VOTE = Endpoint("votacoes/{id}", VoteDetail, many=False, string_id=True)
VOTE_ORIENTATIONS = Endpoint("votacoes/{id}/orientacoes", VoteOrientation, string_id=True)
VOTE_BALLOTS = Endpoint("votacoes/{id}/votos", Ballot, string_id=True)
