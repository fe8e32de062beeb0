from app.db.base import SessionLocal
from app.models.question import Question
from app.models.user_knowledge import UserKnowledge
from app.services.errors import StoreError, UpstreamUnavailable
from app.services.question_store import QuestionStore
from app.services.seed import BASELINE_QUESTIONS
from tests.factories import make_draft

QUESTION_KEYS = {
    "id", "question", "description", "constraints", "hint",
    "solution", "code_solution", "category", "trivia",
}


def _insert(draft, shown=False):
    with SessionLocal() as db:
        return QuestionStore(db).insert(draft, shown=shown).id


def _all_questions():
    with SessionLocal() as db:
        return db.query(Question).order_by(Question.id).all()


def test_root(client):
    assert client.get("/").json() == {"ok": True}


def test_two_sum_then_generated_binary_search(client, stub_generator):
    two_sum_id = _insert(make_draft("Two Sum", "array"))

    r = client.get("/question")
    assert r.status_code == 200
    body = r.json()
    assert set(body) == QUESTION_KEYS
    assert body["id"] == two_sum_id
    assert body["question"] == "Two Sum"
    assert [q.shown for q in _all_questions()] == [True]

    stub_generator.results.append(make_draft("Binary Search", "array"))
    r = client.get("/question")
    assert r.status_code == 200
    assert r.json()["question"] == "Binary Search"

    rows = _all_questions()
    assert [(q.question, q.shown) for q in rows] == [("Two Sum", True), ("Binary Search", True)]
    assert r.json()["id"] == rows[1].id


def test_successive_questions_do_not_repeat(client, stub_generator):
    for i in range(4):
        _insert(make_draft(f"Q{i}"))

    ids = [client.get("/question").json()["id"] for _ in range(4)]

    assert len(set(ids)) == 4
    assert stub_generator.calls == []


def test_exhausted_seed_generates_exactly_once(client, stub_generator):
    r = client.post("/seed")
    assert r.status_code == 201
    assert r.json()["inserted"] == len(BASELINE_QUESTIONS)

    for _ in BASELINE_QUESTIONS:
        assert client.get("/question").status_code == 200
    assert stub_generator.calls == []

    stub_generator.results.append(make_draft("Binary Search"))
    r = client.get("/question")
    assert r.status_code == 200
    assert len(stub_generator.calls) == 1
    titles, _ = stub_generator.calls[0]
    assert titles == {q.question for q in BASELINE_QUESTIONS}

    generated = [q for q in _all_questions() if q.question == "Binary Search"]
    assert len(generated) == 1
    assert generated[0].shown is True


def test_known_category_is_excluded_from_generation(client, stub_generator):
    r = client.post("/know-category", json={"user_id": "u1", "category": "array"})
    assert r.status_code == 201
    assert isinstance(r.json()["id"], int)

    stub_generator.results.append(make_draft("Merge Intervals", "intervals"))
    r = client.get("/question", params={"user_id": "u1"})
    assert r.status_code == 200
    _, categories = stub_generator.calls[0]
    assert "array" in categories


def test_known_category_is_per_user(client, stub_generator):
    client.post("/know-category", json={"user_id": "u1", "category": "array"})
    stub_generator.results.append(make_draft("Merge Intervals", "intervals"))

    client.get("/question")  # 기본 사용자

    _, categories = stub_generator.calls[0]
    assert categories == set()


def test_know_category_duplicates_are_accepted(client):
    first = client.post("/know-category", json={"user_id": "u1", "category": "array"})
    second = client.post("/know-category", json={"user_id": "u1", "category": "array"})
    assert first.status_code == second.status_code == 201
    assert first.json()["id"] != second.json()["id"]
    with SessionLocal() as db:
        assert db.query(UserKnowledge).count() == 2


def test_know_category_validation(client):
    r = client.post("/know-category", json={"user_id": "u1"})
    assert r.status_code == 422


def test_malformed_generation_returns_message_and_inserts_nothing(client, stub_generator):
    # stub 에 준비된 결과가 없으면 MalformedResponse
    r = client.get("/question")
    assert r.status_code == 500
    assert r.json() == {"message": "could not produce question"}
    assert _all_questions() == []


def test_upstream_failure_returns_message(client, stub_generator):
    stub_generator.results.append(UpstreamUnavailable("timeout"))
    r = client.get("/question")
    assert r.status_code == 500
    assert "message" in r.json()
    assert _all_questions() == []


def test_store_failure_returns_raw_error(client, monkeypatch):
    def boom(self, max_attempts=2):
        raise StoreError("database is locked")

    monkeypatch.setattr(QuestionStore, "claim_unshown", boom)
    r = client.get("/question")
    assert r.status_code == 500
    assert r.json() == {"error": "database is locked"}


def test_know_category_store_failure(client, monkeypatch):
    from app.services.knowledge_ledger import KnowledgeLedger

    def boom(self, user_id, category):
        raise StoreError("disk I/O error")

    monkeypatch.setattr(KnowledgeLedger, "record_known", boom)
    r = client.post("/know-category", json={"user_id": "u1", "category": "array"})
    assert r.status_code == 500
    assert r.json() == {"error": "disk I/O error"}


def test_seed_is_idempotent(client):
    assert client.post("/seed").json()["inserted"] == len(BASELINE_QUESTIONS)
    assert client.post("/seed").json()["inserted"] == 0
    assert len(_all_questions()) == len(BASELINE_QUESTIONS)
    assert all(q.shown is False for q in _all_questions())


def test_dashboard(client, tmp_path, monkeypatch):
    from app.config import settings

    monkeypatch.setattr(settings, "static_dir", tmp_path)
    assert client.get("/dashboard").status_code == 404

    (tmp_path / "pages").mkdir()
    (tmp_path / "pages" / "dashboard.html").write_text("<h1>Dashboard</h1>")
    r = client.get("/dashboard")
    assert r.status_code == 200
    assert "Dashboard" in r.text
