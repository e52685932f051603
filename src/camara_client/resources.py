"""
Resource collections of the Câmara API.

Each class only binds catalog endpoints to method names; validation, URL
building, pagination and conversion all happen in the client engine. Options are
passed with their upstream names, either as a mapping or as keyword arguments::

    await client.legislators.get_all(siglaUf=["SP"], ordenarPor="nome")
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Optional

from . import endpoints as ep
from .models import (AgendaItem, Ballot, Bill, BillAuthor, BillDetail,
                     BillProceeding, BillTheme, Bloc, BoardMember, Body,
                     BodyDetail, BodyMember, Event, EventDetail, Expense,
                     Front, FrontDetail, FrontMember, Legislator,
                     LegislatorBody, LegislatorDetail, Legislature,
                     LegislatureLeader, Occupation, Party, PartyDetail,
                     PartyLeader, Profession, RelatedBill, Speech, Vote,
                     VoteDetail, VoteOrientation)

if TYPE_CHECKING:
    from .camara_client import CamaraAPIClient

Options = Optional[Mapping[str, Any]]


def _merge(options: Options, kwargs: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(options or {})
    merged.update(kwargs)
    return merged


class Resource:
    def __init__(self, client: "CamaraAPIClient"):
        self._client = client

    async def _many(self, endpoint: ep.Endpoint, identifier=None, options: Options = None, **kwargs) -> List[Any]:
        return await self._client._get_many(endpoint, identifier, _merge(options, kwargs))

    async def _one(self, endpoint: ep.Endpoint, identifier) -> Any:
        return await self._client._get_one(endpoint, identifier)


# ------------- blocos -------------
class Blocs(Resource):
    """Party blocs (blocos partidários)."""

    async def get_all(self, options: Options = None, **kwargs) -> List[Bloc]:
        """List party blocs."""
        return await self._many(ep.BLOCS, None, options, **kwargs)

    async def get(self, bloc_id: int) -> Bloc:
        """Fetch one bloc by id."""
        return await self._one(ep.BLOC, bloc_id)


# ------------- deputados -------------
class Legislators(Resource):
    """Deputies. Without a time option the service lists only those currently in office."""

    async def get_all(self, options: Options = None, **kwargs) -> List[Legislator]:
        """List deputies matching the given filters."""
        return await self._many(ep.LEGISLATORS, None, options, **kwargs)

    async def get(self, legislator_id: int) -> LegislatorDetail:
        """Fetch a deputy's full record, including the latest status."""
        return await self._one(ep.LEGISLATOR, legislator_id)

    async def get_expenses(self, legislator_id: int, options: Options = None, **kwargs) -> List[Expense]:
        """Parliamentary quota expenses; defaults upstream to the last six months."""
        return await self._many(ep.LEGISLATOR_EXPENSES, legislator_id, options, **kwargs)

    async def get_speeches(self, legislator_id: int, options: Options = None, **kwargs) -> List[Speech]:
        """List speeches given by a deputy."""
        return await self._many(ep.LEGISLATOR_SPEECHES, legislator_id, options, **kwargs)

    async def get_events(self, legislator_id: int, options: Options = None, **kwargs) -> List[Event]:
        """List events a deputy took part in."""
        return await self._many(ep.LEGISLATOR_EVENTS, legislator_id, options, **kwargs)

    async def get_fronts(self, legislator_id: int) -> List[Front]:
        """List the parliamentary fronts a deputy belongs to."""
        return await self._many(ep.LEGISLATOR_FRONTS, legislator_id)

    async def get_occupations(self, legislator_id: int) -> List[Occupation]:
        """List a deputy's declared occupations."""
        return await self._many(ep.LEGISLATOR_OCCUPATIONS, legislator_id)

    async def get_bodies(self, legislator_id: int, options: Options = None, **kwargs) -> List[LegislatorBody]:
        """List the bodies a deputy is or was a member of."""
        return await self._many(ep.LEGISLATOR_BODIES, legislator_id, options, **kwargs)

    async def get_professions(self, legislator_id: int) -> List[Profession]:
        """List a deputy's declared professions."""
        return await self._many(ep.LEGISLATOR_PROFESSIONS, legislator_id)


# ------------- eventos -------------
class Events(Resource):
    async def get_all(self, options: Options = None, **kwargs) -> List[Event]:
        """List events matching the given filters."""
        return await self._many(ep.EVENTS, None, options, **kwargs)

    async def get(self, event_id: int) -> EventDetail:
        """Fetch one event by id."""
        return await self._one(ep.EVENT, event_id)

    async def get_legislators(self, event_id: int) -> List[Legislator]:
        """List the deputies present at an event."""
        return await self._many(ep.EVENT_LEGISLATORS, event_id)

    async def get_bodies(self, event_id: int) -> List[Body]:
        """List the bodies that organised an event."""
        return await self._many(ep.EVENT_BODIES, event_id)

    async def get_agenda(self, event_id: int) -> List[AgendaItem]:
        """List the agenda items of an event."""
        return await self._many(ep.EVENT_AGENDA, event_id)

    async def get_votes(self, event_id: int) -> List[Vote]:
        """List the votes held during an event."""
        return await self._many(ep.EVENT_VOTES, event_id)


# ------------- frentes -------------
class Fronts(Resource):
    """Parliamentary fronts (frentes parlamentares)."""

    async def get_all(self, options: Options = None, **kwargs) -> List[Front]:
        """List parliamentary fronts."""
        return await self._many(ep.FRONTS, None, options, **kwargs)

    async def get(self, front_id: int) -> FrontDetail:
        """Fetch one front by id."""
        return await self._one(ep.FRONT, front_id)

    async def get_members(self, front_id: int) -> List[FrontMember]:
        """List the members of a front."""
        return await self._many(ep.FRONT_MEMBERS, front_id)


# ------------- legislaturas -------------
class Legislatures(Resource):
    async def get_all(self, options: Options = None, **kwargs) -> List[Legislature]:
        """List legislatures."""
        return await self._many(ep.LEGISLATURES, None, options, **kwargs)

    async def get(self, legislature_id: int) -> Legislature:
        """Fetch one legislature by id."""
        return await self._one(ep.LEGISLATURE_ONE, legislature_id)

    async def get_leaders(self, legislature_id: int) -> List[LegislatureLeader]:
        """List the party leaders of a legislature."""
        return await self._many(ep.LEGISLATURE_LEADERS, legislature_id)

    async def get_board(self, legislature_id: int, options: Options = None, **kwargs) -> List[BoardMember]:
        """President, vice-presidents, secretaries and their substitutes."""
        return await self._many(ep.LEGISLATURE_BOARD, legislature_id, options, **kwargs)


# ------------- orgaos -------------
class Bodies(Resource):
    """Committees and the other bodies (órgãos) of the Chamber."""

    async def get_all(self, options: Options = None, **kwargs) -> List[Body]:
        """List bodies matching the given filters."""
        return await self._many(ep.BODIES, None, options, **kwargs)

    async def get(self, body_id: int) -> BodyDetail:
        """Fetch one body by id."""
        return await self._one(ep.BODY, body_id)

    async def get_events(self, body_id: int, options: Options = None, **kwargs) -> List[Event]:
        """List the events held by a body."""
        return await self._many(ep.BODY_EVENTS, body_id, options, **kwargs)

    async def get_members(self, body_id: int, options: Options = None, **kwargs) -> List[BodyMember]:
        """List the members of a body."""
        return await self._many(ep.BODY_MEMBERS, body_id, options, **kwargs)

    async def get_votes(self, body_id: int, options: Options = None, **kwargs) -> List[Vote]:
        """
        Votes held by the body. ``dataInicio`` and ``dataFim`` must fall in the same
        year; either one alone extends the range to the end (or start) of that year.
        """
        return await self._many(ep.BODY_VOTES, body_id, options, **kwargs)


# ------------- partidos -------------
class Parties(Resource):
    async def get_all(self, options: Options = None, **kwargs) -> List[Party]:
        """List parties."""
        return await self._many(ep.PARTIES, None, options, **kwargs)

    async def get(self, party_id: int) -> PartyDetail:
        """Fetch one party by id."""
        return await self._one(ep.PARTY, party_id)

    async def get_leaders(self, party_id: int) -> List[PartyLeader]:
        """List the leaders of a party."""
        return await self._many(ep.PARTY_LEADERS, party_id)

    async def get_members(self, party_id: int, options: Options = None, **kwargs) -> List[Legislator]:
        """List the deputies affiliated with a party."""
        return await self._many(ep.PARTY_MEMBERS, party_id, options, **kwargs)


# ------------- proposicoes -------------
class Bills(Resource):
    """Bills and other propositions (proposições)."""

    async def get_all(self, options: Options = None, **kwargs) -> List[Bill]:
        """Search bills."""
        return await self._many(ep.BILLS, None, options, **kwargs)

    async def get(self, bill_id: int) -> BillDetail:
        """Fetch a bill's full record, including its current status."""
        return await self._one(ep.BILL, bill_id)

    async def get_authors(self, bill_id: int) -> List[BillAuthor]:
        """List the authors of a bill."""
        return await self._many(ep.BILL_AUTHORS, bill_id)

    async def get_related(self, bill_id: int) -> List[RelatedBill]:
        """List the bills related to a bill."""
        return await self._many(ep.BILL_RELATED, bill_id)

    async def get_themes(self, bill_id: int) -> List[BillTheme]:
        """List the themes a bill is classified under."""
        return await self._many(ep.BILL_THEMES, bill_id)

    async def get_proceedings(self, bill_id: int, options: Options = None, **kwargs) -> List[BillProceeding]:
        """List the proceedings (tramitações) of a bill."""
        return await self._many(ep.BILL_PROCEEDINGS, bill_id, options, **kwargs)

    async def get_votes(self, bill_id: int, options: Options = None, **kwargs) -> List[Vote]:
        """List the votes taken on a bill."""
        return await self._many(ep.BILL_VOTES, bill_id, options, **kwargs)


# ------------- votacoes -------------
class Votes(Resource):
    """Roll-call votes (votações). Identifiers are strings such as ``"2265603-43"``."""

    async def get_all(self, options: Options = None, **kwargs) -> List[Vote]:
        """Defaults upstream to the last 30 days across every body."""
        return await self._many(ep.VOTES, None, options, **kwargs)

    async def get(self, vote_id: str) -> VoteDetail:
        """Fetch one vote by id."""
        return await self._one(ep.VOTE, vote_id)

    async def get_orientations(self, vote_id: str) -> List[VoteOrientation]:
        """List the party orientations given for a vote."""
        return await self._many(ep.VOTE_ORIENTATIONS, vote_id)

    async def get_ballots(self, vote_id: str) -> List[Ballot]:
        """List each deputy's ballot in a vote."""
        return await self._many(ep.VOTE_BALLOTS, vote_id)
