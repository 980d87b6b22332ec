import pytest

from src.session_insights.session_insights.container import build_container_for
from src.session_insights.session_insights.core.exceptions import RosterUnavailableError
from src.session_insights.session_insights.main import create_app

from tests.factories import InMemoryRoster, make_student

FILTERS = {"grade": "2nd", "center": "Nasr City Center", "week": "1"}


class BrokenRoster:
    def get_all_students(self):
        raise RosterUnavailableError("Could not load the student roster")


def _client(monkeypatch, roster_source):
    monkeypatch.setenv("APP_ENV", "testing")
    container = build_container_for(roster_source, page_size=50)
    app = create_app(container=container)
    return app.test_client(), container


@pytest.fixture
def source(roster):
    return InMemoryRoster(roster)


@pytest.fixture
def client(monkeypatch, source):
    c, _ = _client(monkeypatch, source)
    return c


def test_session_info_without_filters_is_empty(client, source):
    res = client.get("/session-info")
    data = res.get_json()

    assert res.status_code == 200
    assert data["success"] is True
    assert data["all_filters_selected"] is False
    assert data["tables"]["attended"]["items"] == []
    assert source.calls == 0


def test_session_info_with_filters(client):
    res = client.get("/session-info", query_string=FILTERS)
    data = res.get_json()

    assert res.status_code == 200
    assert [r["id"] for r in data["tables"]["attended"]["items"]] == [1, 3]
    assert [r["id"] for r in data["tables"]["absent"]["items"]] == [2, 6]
    assert data["stats"]["mc"] == 1
    assert data["stats"]["nmc_percent"] == 50


def test_selection_survives_between_requests(client):
    client.get("/session-info", query_string=FILTERS)

    data = client.get("/session-info").get_json()

    assert data["selection"] == {"grade": "2nd", "center": "Nasr City Center", "week": "1"}
    assert data["all_filters_selected"] is True


def test_page_args_ignored_when_filters_change(monkeypatch):
    students = [make_student(i, weeks=[]) for i in range(1, 131)]
    client, _ = _client(monkeypatch, InMemoryRoster(students))

    first = client.get("/session-info", query_string={**FILTERS, "absent_page": "3"}).get_json()
    assert first["tables"]["absent"]["pagination"]["current_page"] == 1

    second = client.get("/session-info", query_string={"absent_page": "3"}).get_json()
    absent = second["tables"]["absent"]
    assert absent["pagination"]["current_page"] == 3
    assert len(absent["items"]) == 30


def test_invalid_week_is_rejected(client):
    res = client.get("/session-info", query_string={**FILTERS, "week": "soon"})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_invalid_page_is_rejected(client):
    client.get("/session-info", query_string=FILTERS)

    res = client.get("/session-info", query_string={"attended_page": "x"})

    assert res.status_code == 400


def test_roster_failure_returns_banner_timeout(monkeypatch):
    client, _ = _client(monkeypatch, BrokenRoster())

    res = client.get("/session-info", query_string=FILTERS)
    data = res.get_json()

    assert res.status_code == 503
    assert data["message"] == "Could not load the student roster"
    assert data["dismiss_after"] == 5


def test_clear_one_field(client):
    client.get("/session-info", query_string=FILTERS)

    res = client.post("/session-info/selection/clear", json={"field": "week"})

    assert res.status_code == 200
    assert res.get_json()["selection"] == {"grade": "2nd", "center": "Nasr City Center", "week": None}


def test_clear_unknown_field(client):
    res = client.post("/session-info/selection/clear", json={"field": "term"})

    assert res.status_code == 400


def test_roster_refresh_forces_refetch(client, source):
    client.get("/session-info", query_string=FILTERS)
    client.get("/session-info")
    assert source.calls == 1

    assert client.post("/session-info/roster/refresh").status_code == 200
    client.get("/session-info")
    assert source.calls == 2


def test_csv_export(client):
    res = client.get("/session-info/absent.csv", query_string=FILTERS)

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "session_info_absent.csv" in res.headers["Content-Disposition"]
    body = res.data.decode("utf-8-sig").splitlines()
    assert body[0].startswith("id,name,grade")
    assert len(body) == 3


def test_csv_requires_all_filters(client):
    res = client.get("/session-info/attended.csv", query_string={"grade": "2nd"})

    assert res.status_code == 400


def test_csv_unknown_bucket(client):
    res = client.get("/session-info/everyone.csv", query_string=FILTERS)

    assert res.status_code == 400


def test_lesson_details(client):
    res = client.get("/session-info/students/1/details/hw")
    data = res.get_json()

    assert res.status_code == 200
    assert data["title"] == "Missing Homework for Student 1 • ID: 1"
    assert [w["week"] for w in data["weeks"]] == [2]


def test_lesson_details_unknown_student(client):
    assert client.get("/session-info/students/999/details/absent").status_code == 404


def test_lesson_details_unknown_category(client):
    assert client.get("/session-info/students/1/details/grades").status_code == 400


class CrashingRoster:
    def get_all_students(self):
        raise RuntimeError("unexpected")


def test_non_ascii_digit_page_is_rejected(client):
    client.get("/session-info", query_string=FILTERS)

    res = client.get("/session-info", query_string={"attended_page": "²"})

    assert res.status_code == 400
    assert res.get_json()["success"] is False


@pytest.mark.parametrize(
    "url",
    [
        "/session-info?grade=2nd&center=Nasr+City+Center&week=1",
        "/session-info/attended.csv?grade=2nd&center=Nasr+City+Center&week=1",
        "/session-info/students/1/details/absent",
    ],
)
def test_unexpected_errors_are_json_500(monkeypatch, url):
    client, _ = _client(monkeypatch, CrashingRoster())

    res = client.get(url)

    assert res.status_code == 500
    assert res.get_json()["success"] is False
