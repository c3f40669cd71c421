import pytest

from app.db.repositories.tutorials import TutorialRepository
from app.features.tutorials.schemas import TutorialCreateIn, TutorialUpdateIn
from app.features.tutorials.services import (
    MutationOutcome,
    TutorialService,
    TutorialValidationError,
)


@pytest.fixture()
def svc(session):
    return TutorialService(TutorialRepository(session))


def test_create_defaults_published_to_false(svc):
    t = svc.create(TutorialCreateIn(title="A"))
    assert t.id is not None
    assert t.published is False
    assert t.description is None


@pytest.mark.parametrize("title", [None, ""])
def test_create_requires_title(svc, title):
    with pytest.raises(TutorialValidationError, match="Content can not be empty!"):
        svc.create(TutorialCreateIn(title=title, description="d"))
    assert svc.find_all() == []


def test_find_all_with_empty_title_means_no_filter(svc):
    svc.create(TutorialCreateIn(title="one"))
    svc.create(TutorialCreateIn(title="two"))
    assert len(svc.find_all("")) == 2
    assert [t.title for t in svc.find_all("tw")] == ["two"]


def test_find_all_published_is_subset_of_find_all(svc):
    svc.create(TutorialCreateIn(title="a", published=True))
    svc.create(TutorialCreateIn(title="b"))
    published = svc.find_all_published()
    assert [t.title for t in published] == ["a"]
    assert {t.id for t in published} <= {t.id for t in svc.find_all()}


def test_update_is_partial(svc, session):
    t = svc.create(TutorialCreateIn(title="T", description="old", published=True))
    assert svc.update(t.id, TutorialUpdateIn(description="new")) is MutationOutcome.DONE
    session.expire_all()
    fresh = svc.find_one(t.id)
    assert (fresh.title, fresh.description, fresh.published) == ("T", "new", True)


def test_update_ignores_blank_title_and_null_published(svc, session):
    t = svc.create(TutorialCreateIn(title="T", published=True))
    outcome = svc.update(t.id, TutorialUpdateIn(title="", published=None))
    assert outcome is MutationOutcome.NOT_FOUND
    session.expire_all()
    fresh = svc.find_one(t.id)
    assert fresh.title == "T"
    assert fresh.published is True


def test_update_can_clear_description(svc, session):
    t = svc.create(TutorialCreateIn(title="T", description="d"))
    assert svc.update(t.id, TutorialUpdateIn(description=None)) is MutationOutcome.DONE
    session.expire_all()
    assert svc.find_one(t.id).description is None


def test_update_unknown_id(svc):
    assert svc.update(42, TutorialUpdateIn(title="x")) is MutationOutcome.NOT_FOUND
    assert svc.find_all() == []


def test_delete_and_delete_all(svc):
    a = svc.create(TutorialCreateIn(title="a"))
    svc.create(TutorialCreateIn(title="b"))
    svc.create(TutorialCreateIn(title="c"))

    assert svc.delete(a.id) is MutationOutcome.DONE
    assert svc.delete(a.id) is MutationOutcome.NOT_FOUND
    assert svc.find_one(a.id) is None
    assert svc.delete_all() == 2
    assert svc.find_all() == []
