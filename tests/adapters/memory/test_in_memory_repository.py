from __future__ import annotations

import pytest

from orderdesk.adapters.memory import InMemoryRepository, article_repository, customer_repository
from orderdesk.domain.model import Article, Customer
from orderdesk.domain.ports import Repository
from tests.helpers.records import make_article, make_customer


@pytest.fixture
def repository() -> InMemoryRepository[Customer, int]:
    repo = customer_repository()
    repo.save_all([make_customer(1, "Meyer, Eric"), make_customer(2, "Bayer, Anne")])
    return repo


def test_satisfies_repository_port(repository: InMemoryRepository[Customer, int]) -> None:
    assert isinstance(repository, Repository)


def test_count_and_find_all(repository: InMemoryRepository[Customer, int]) -> None:
    assert repository.count() == 2
    assert len(repository) == 2
    assert {customer.last_name for customer in repository.find_all()} == {"Meyer", "Bayer"}


def test_find_by_id(repository: InMemoryRepository[Customer, int]) -> None:
    found = repository.find_by_id(1)

    assert found is not None
    assert found.last_name == "Meyer"
    assert repository.find_by_id(99) is None


def test_find_by_id_rejects_none(repository: InMemoryRepository[Customer, int]) -> None:
    with pytest.raises(ValueError, match="id is None"):
        repository.find_by_id(None)  # type: ignore[arg-type]


def test_exists_by_id(repository: InMemoryRepository[Customer, int]) -> None:
    assert repository.exists_by_id(2) is True
    assert repository.exists_by_id(3) is False
    assert 2 in repository


def test_find_all_by_id_skips_missing(repository: InMemoryRepository[Customer, int]) -> None:
    found = repository.find_all_by_id([2, 42, None, 1])  # type: ignore[list-item]

    assert [customer.id for customer in found] == [2, 1]


def test_find_all_by_id_rejects_none(repository: InMemoryRepository[Customer, int]) -> None:
    with pytest.raises(ValueError, match="ids is None"):
        repository.find_all_by_id(None)  # type: ignore[arg-type]


def test_save_replaces_existing_entity_wholesale() -> None:
    repo = customer_repository()
    original = make_customer(1, "Meyer, Eric").add_contact("eric@gmail.com")
    replacement = make_customer(1, "Bayer, Anne")
    repo.save(original)

    returned = repo.save(replacement)

    stored = repo.find_by_id(1)
    assert returned is replacement
    assert stored is replacement
    assert stored.last_name == "Bayer"
    assert stored.contacts == ()
    assert repo.count() == 1


def test_save_rejects_none_and_unidentified_entities() -> None:
    repo = customer_repository()

    with pytest.raises(ValueError, match="entity is None"):
        repo.save(None)  # type: ignore[arg-type]
    with pytest.raises(ValueError, match="entity id is None"):
        repo.save(Customer.create("Meyer, Eric"))
    assert repo.count() == 0


def test_save_all_preserves_input_order() -> None:
    repo = article_repository()
    articles = [make_article("SKU-3"), make_article("SKU-1"), make_article("SKU-2")]

    saved = repo.save_all(articles)

    assert saved == articles
    assert repo.count() == 3


def test_delete_by_id(repository: InMemoryRepository[Customer, int]) -> None:
    repository.delete_by_id(1)
    repository.delete_by_id(1)

    assert repository.count() == 1
    with pytest.raises(ValueError, match="id is None"):
        repository.delete_by_id(None)  # type: ignore[arg-type]


def test_delete_entity(repository: InMemoryRepository[Customer, int]) -> None:
    stored = repository.find_by_id(2)
    assert stored is not None

    repository.delete(stored)
    repository.delete(make_customer(77))

    assert repository.find_by_id(2) is None
    assert repository.count() == 1


def test_delete_all_by_id_removes_only_existing(
    repository: InMemoryRepository[Customer, int],
) -> None:
    repository.delete_all_by_id([1, 404])

    assert repository.count() == 1
    assert repository.exists_by_id(2)


def test_delete_all_entities(repository: InMemoryRepository[Customer, int]) -> None:
    repository.delete_all(list(repository.find_all()))

    assert repository.count() == 0
    with pytest.raises(ValueError, match="entities is None"):
        repository.delete_all(None)  # type: ignore[arg-type]


def test_clear(repository: InMemoryRepository[Customer, int]) -> None:
    repository.clear()

    assert repository.count() == 0
    assert repository.find_all() == ()


def test_custom_id_extraction() -> None:
    repo: InMemoryRepository[Article, str] = InMemoryRepository(
        lambda article: article.description
    )
    repo.save(Article.create("Widget"))

    assert repo.exists_by_id("Widget")


def test_constructor_requires_id_function() -> None:
    with pytest.raises(ValueError, match="id_of"):
        InMemoryRepository(None)  # type: ignore[arg-type]
