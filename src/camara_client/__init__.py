from .camara_client import CamaraAPIClient  # re-export public class
from .endpoints import Endpoint
from .exceptions import (BadRequestError, CamaraClientError, HTTPStatusError,
                         InvalidInputError, InvalidLinkError,
                         MalformedResponseError, NotFoundError,
                         TransportError, TypeMismatchError,
                         UnexpectedStatusError, UnknownOptionError,
                         UpstreamServerError)
from .models import (AgendaItem, Ballot, Bill, BillAuthor, BillDetail,
                     BillProceeding, BillTheme, Bloc, BoardMember, Body,
                     BodyDetail, BodyMember, Event, EventDetail, Expense,
                     Front, FrontDetail, FrontMember, Legislator,
                     LegislatorBody, LegislatorDetail, LegislatorStatus,
                     Legislature, LegislatureLeader, NavigationLink,
                     Occupation, Page, Party, PartyDetail, PartyLeader,
                     Profession, Record, RelatedBill, Speech, Vote,
                     VoteDetail, VoteOrientation)
from .pagination import aggregate
from .query import OptionKind, build_url
from .transport import RequestsTransport, Transport, TransportResponse
from .validators import (validate_date, validate_id, validate_string_id,
                         validate_time)

__all__ = [
    "CamaraAPIClient",
    "Endpoint",
    "OptionKind",
    "build_url",
    "aggregate",
    "RequestsTransport",
    "Transport",
    "TransportResponse",
    "validate_date",
    "validate_id",
    "validate_string_id",
    "validate_time",
    # errors
    "CamaraClientError",
    "InvalidInputError",
    "UnknownOptionError",
    "TypeMismatchError",
    "InvalidLinkError",
    "MalformedResponseError",
    "HTTPStatusError",
    "BadRequestError",
    "NotFoundError",
    "UpstreamServerError",
    "UnexpectedStatusError",
    "TransportError",
    # models
    "NavigationLink",
    "Page",
    "Record",
    "AgendaItem",
    "Ballot",
    "Bill",
    "BillAuthor",
    "BillDetail",
    "BillProceeding",
    "BillTheme",
    "Bloc",
    "BoardMember",
    "Body",
    "BodyDetail",
    "BodyMember",
    "Event",
    "EventDetail",
    "Expense",
    "Front",
    "FrontDetail",
    "FrontMember",
    "Legislator",
    "LegislatorBody",
    "LegislatorDetail",
    "LegislatorStatus",
    "Legislature",
    "LegislatureLeader",
    "Occupation",
    "Party",
    "PartyDetail",
    "PartyLeader",
    "Profession",
    "RelatedBill",
    "Speech",
    "Vote",
    "VoteDetail",
    "VoteOrientation",
]
