# tests/test_camara_client.py
import asyncio
import json
import time
from datetime import date

import pytest
import requests
import requests_mock

from camara_client import (BadRequestError, Ballot, BillDetail,
                           CamaraAPIClient, InvalidInputError,
                           InvalidLinkError, Legislator, LegislatorDetail,
                           MalformedResponseError, NotFoundError,
                           TransportError, UnexpectedStatusError,
                           UnknownOptionError, UpstreamServerError)
from camara_client import endpoints as ep
from conftest import API_BASE, envelope

DEPUTADO = {
    "id": 525, "uri": f"{API_BASE}/deputados/525", "nome": "Fulano de Tal",
    "siglaPartido": "XYZ", "uriPartido": f"{API_BASE}/partidos/1", "siglaUf": "SP",
    "idLegislatura": 57, "urlFoto": "https://camara.leg.br/foto.jpg", "email": None,
}


def run(coro):
    return asyncio.run(coro)


# ------------- end to end through requests -------------

def test_list_legislators_single_page(client, requests_mock):
    url = f"{API_BASE}/deputados?itens=100&id=525&ordem=desc&ordenarPor=nome"
    requests_mock.get(url, json=envelope([DEPUTADO], self_href=url))

    out = run(client.legislators.get_all({"id": [525], "ordem": "desc", "ordenarPor": "nome"}))

    assert len(out) == 1
    assert isinstance(out[0], Legislator)
    assert out[0].id == 525
    assert out[0].sigla_uf == "SP"
    assert out[0].raw == DEPUTADO
    assert requests_mock.call_count == 1
    assert requests_mock.last_request.url.endswith("&id=525&ordem=desc&ordenarPor=nome")


def test_keyword_options_match_mapping_options(client, requests_mock):
    url = f"{API_BASE}/deputados?itens=100&id=525&ordem=desc&ordenarPor=nome"
    requests_mock.get(url, json=envelope([DEPUTADO]))
    out = run(client.legislators.get_all(id=[525], ordem="desc", ordenarPor="nome"))
    assert [d.id for d in out] == [525]
    assert requests_mock.last_request.url.endswith("&id=525&ordem=desc&ordenarPor=nome")


def test_list_follows_next_links(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/partidos?itens=100",
              json=envelope([{"id": 1, "sigla": "AAA"}], next_href=f"{API_BASE}/partidos?itens=100&pagina=2"))
        m.get(f"{API_BASE}/partidos?itens=100&pagina=2",
              json=envelope([{"id": 2, "sigla": "BBB"}], next_href=f"{API_BASE}/partidos?itens=100&pagina=3"))
        m.get(f"{API_BASE}/partidos?itens=100&pagina=3",
              json=envelope([{"id": 3, "sigla": "CCC"}]))

        parties = run(client.parties.get_all())

        assert [p.sigla for p in parties] == ["AAA", "BBB", "CCC"]
        assert m.call_count == 3


def test_server_error_on_first_page(client, requests_mock):
    requests_mock.get(f"{API_BASE}/proposicoes?itens=100", status_code=500, text="boom")
    with pytest.raises(UpstreamServerError) as exc:
        run(client.bills.get_all())
    assert exc.value.status_code == 500


def test_server_error_mid_chain_discards_partial_results(client, requests_mock):
    requests_mock.get(f"{API_BASE}/orgaos?itens=100",
                      json=envelope([{"id": 1}], next_href=f"{API_BASE}/orgaos?itens=100&pagina=2"))
    requests_mock.get(f"{API_BASE}/orgaos?itens=100&pagina=2", status_code=500)
    with pytest.raises(UpstreamServerError):
        run(client.bodies.get_all())


@pytest.mark.parametrize("status,error", [(400, BadRequestError), (404, NotFoundError), (418, UnexpectedStatusError)])
def test_status_policy(client, requests_mock, status, error):
    requests_mock.get(f"{API_BASE}/deputados/1", status_code=status, text="x")
    with pytest.raises(error) as exc:
        run(client.legislators.get(1))
    assert exc.value.status_code == status
    assert exc.value.url == f"{API_BASE}/deputados/1"


def test_rate_limit_is_retried(client):
    with requests_mock.Mocker() as m:
        m.get(f"{API_BASE}/blocos/3", [
            {"status_code": 429, "headers": {"Retry-After": "0"}, "text": "slow down"},
            {"status_code": 200, "json": envelope({"id": "3", "nome": "PT, PCdoB", "idLegislatura": "57"})},
        ])
        bloc = run(client.blocs.get(3))
        assert bloc.nome == "PT, PCdoB"
        assert m.call_count == 2


def test_rate_limit_exhausted(client, requests_mock):
    requests_mock.get(f"{API_BASE}/blocos/3", status_code=429, text="slow down")
    with pytest.raises(UnexpectedStatusError) as exc:
        run(client.blocs.get(3))
    assert exc.value.status_code == 429
    assert requests_mock.call_count == client.transport.max_tries


def test_cancelled_call_makes_no_further_attempts(client, requests_mock):
    requests_mock.get(f"{API_BASE}/blocos/3", status_code=429, headers={"Retry-After": "5"}, text="slow down")

    async def scenario():
        with pytest.raises(asyncio.TimeoutError):
            await asyncio.wait_for(client.blocs.get(3), timeout=0.5)

    started = time.monotonic()
    run(scenario())
    assert time.monotonic() - started < 2
    assert requests_mock.call_count == 1


def test_connection_errors_become_transport_errors(client, requests_mock):
    requests_mock.get(f"{API_BASE}/eventos?itens=100", exc=requests.ConnectionError("refused"))
    with pytest.raises(TransportError) as exc:
        run(client.events.get_all())
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_malformed_json(client, requests_mock):
    requests_mock.get(f"{API_BASE}/frentes/7", text="<html>not json</html>")
    with pytest.raises(MalformedResponseError):
        run(client.fronts.get(7))


def test_parse_retry_after(client):
    assert client.transport._parse_retry_after("") == 0.0
    assert client.transport._parse_retry_after("1.5") == 1.5
    assert client.transport._parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") == 0.0
    assert client.transport._parse_retry_after("garbage") == 0.0


# ------------- engine, through an in-memory transport -------------

def test_get_one_detail_with_nested_records(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/deputados/204554", envelope({
        "id": 204554, "nomeCivil": "Fulana", "sexo": "F", "redeSocial": ["https://x"],
        "ultimoStatus": dict(DEPUTADO, nomeEleitoral="Fulana", situacao="Exercício",
                             gabinete={"sala": "101"}),
    }))
    # negative ids are sign-flipped
    detail = run(fake_client.legislators.get(-204554))
    assert isinstance(detail, LegislatorDetail)
    assert detail.nome_civil == "Fulana"
    assert detail.ultimo_status.nome_eleitoral == "Fulana"
    assert detail.ultimo_status.gabinete == {"sala": "101"}
    assert fake_transport.calls == [f"{API_BASE}/deputados/204554"]


def test_detail_operations_ignore_next_links(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/deputados/1",
                       envelope({"id": 1, "nomeCivil": "Fulano"}, next_href=f"{API_BASE}/deputados/1?pagina=2"))
    detail = run(fake_client.legislators.get(1))
    assert isinstance(detail, LegislatorDetail)
    assert detail.nome_civil == "Fulano"
    assert fake_transport.calls == [f"{API_BASE}/deputados/1"]


def test_next_link_without_href(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/votacoes?itens=100", envelope([{"id": "1-1"}], next_href=None))
    with pytest.raises(InvalidLinkError):
        run(fake_client.votes.get_all())
    assert len(fake_transport.calls) == 1


def test_invalid_id_never_reaches_the_network(fake_client, fake_transport):
    with pytest.raises(InvalidInputError):
        run(fake_client.bills.get("123"))
    with pytest.raises(InvalidInputError):
        run(fake_client.votes.get(123))
    assert fake_transport.calls == []


def test_unknown_option_never_reaches_the_network(fake_client, fake_transport):
    with pytest.raises(UnknownOptionError):
        run(fake_client.parties.get_all(sigla=["PT"], bogus=1))
    assert fake_transport.calls == []


def test_vote_ballots_use_string_ids(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/votacoes/2265603-43/votos", envelope([
        {"tipoVoto": "Sim", "dataRegistroVoto": "2023-05-10T20:00:00", "deputado_": DEPUTADO},
    ]))
    ballots = run(fake_client.votes.get_ballots("2265603-43"))
    assert isinstance(ballots[0], Ballot)
    assert ballots[0].tipo_voto == "Sim"
    assert ballots[0].deputado.id == 525


def test_bill_search_options(fake_client, fake_transport):
    url = (f"{API_BASE}/proposicoes?itens=100&siglaTipo=PL&ano=2023&tramitacaoSenado=false"
           f"&dataApresentacaoInicio=2023-01-01&idPartidoAutor=36844")
    fake_transport.add(url, envelope([{"id": 1, "siglaTipo": "PL", "numero": 10, "ano": 2023}]))
    bills = run(fake_client.bills.get_all(
        siglaTipo=["PL"], ano=[2023], tramitacaoSenado=False,
        dataApresentacaoInicio=date(2023, 1, 1), idPartidoAutor=36844,
    ))
    assert bills[0].numero == 10
    assert fake_transport.calls == [url]


def test_bill_detail(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/proposicoes/2345", envelope({
        "id": 2345, "siglaTipo": "PEC", "ementa": "Altera...",
        "statusProposicao": {"sequencia": 12, "siglaOrgao": "PLEN", "codSituacao": 1140},
        "campoNovo": "kept in raw",
    }))
    bill = run(fake_client.bills.get(2345))
    assert isinstance(bill, BillDetail)
    assert bill.status_proposicao.sigla_orgao == "PLEN"
    assert bill.raw["campoNovo"] == "kept in raw"


def test_events_with_times(fake_client, fake_transport):
    url = f"{API_BASE}/eventos?itens=100&dataInicio=2024-03-01&horaInicio=09:00&idOrgao=2003"
    fake_transport.add(url, envelope([{"id": 70000, "orgaos": [{"id": 2003, "sigla": "CCJC"}]}]))
    events = run(fake_client.events.get_all(dataInicio="2024-03-01", horaInicio="09:00", idOrgao=[2003]))
    assert events[0].orgaos[0].sigla == "CCJC"


def test_fronts_drop_page_size_from_next_links(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/frentes?idLegislatura=57",
                       envelope([{"id": 1}], next_href=f"{API_BASE}/frentes?idLegislatura=57&pagina=2&itens=1000"))
    fake_transport.add(f"{API_BASE}/frentes?idLegislatura=57&pagina=2", envelope([{"id": 2}]))
    fronts = run(fake_client.fronts.get_all(idLegislatura=[57]))
    assert [f.id for f in fronts] == [1, 2]


def test_body_votes_use_larger_pages(fake_client, fake_transport):
    url = f"{API_BASE}/orgaos/180/votacoes?itens=200&dataInicio=2024-01-01&dataFim=2024-12-31"
    fake_transport.add(url, envelope([{"id": "1-1"}, {"id": "1-2"}]))
    votes = run(fake_client.bodies.get_votes(180, dataInicio="2024-01-01", dataFim="2024-12-31"))
    assert [v.id for v in votes] == ["1-1", "1-2"]


def test_list_endpoint_returning_an_object(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/legislaturas?itens=100", envelope({"id": 57}))
    with pytest.raises(MalformedResponseError):
        run(fake_client.legislatures.get_all())


@pytest.mark.parametrize("body", [
    [1, 2],
    {"links": []},
    {"dados": []},
    {"dados": [], "links": {"rel": "self"}},
    {"dados": [], "links": [{"href": "x"}]},
])
def test_envelope_shape_is_checked(fake_client, fake_transport, body):
    fake_transport.add(f"{API_BASE}/legislaturas/57/lideres?itens=100", json.dumps(body))
    with pytest.raises(MalformedResponseError):
        run(fake_client.legislatures.get_leaders(57))


def test_data_key_is_accepted_for_dados(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/legislaturas/57", {"data": {"id": 57, "dataInicio": "2023-02-01"}, "links": []})
    legislature = run(fake_client.legislatures.get(57))
    assert legislature.data_inicio == "2023-02-01"


def test_fetch_runs_any_catalog_endpoint(fake_client, fake_transport):
    fake_transport.add(f"{API_BASE}/proposicoes/10/temas", envelope([{"codTema": 40, "tema": "Economia"}]))
    themes = run(fake_client.fetch(ep.BILL_THEMES, 10))
    assert themes[0].tema == "Economia"


def test_async_context_manager_closes_transport():
    closed = []

    class Closing:
        async def get(self, url):
            raise AssertionError("not called")

        def close(self):
            closed.append(True)

    async def scenario():
        async with CamaraAPIClient(transport=Closing()) as c:
            assert c.base_url == API_BASE

    run(scenario())
    assert closed == [True]


@pytest.mark.parametrize("name", ["blocs", "legislators", "events", "fronts", "legislatures",
                                  "bodies", "parties", "bills", "votes"])
def test_public_resource_methods_are_documented(fake_client, name):
    resource = getattr(fake_client, name)
    methods = [m for m in dir(resource) if m.startswith("get")]
    assert methods
    for method in methods:
        assert getattr(resource, method).__doc__, f"{name}.{method}"
