import pytest
from bson import ObjectId

from glozzio.errors import InvalidIdError, NotFoundError, ValidationError
from glozzio.services.product_repository import coerce_rating


async def _make_product(repo, **fields):
    result = await repo.create({"name": "Lipstick", "price": 12.5, **fields})
    return str(result.inserted_id)


async def test_create_stores_payload_verbatim(product_repository):
    payload = {"name": "Serum", "tags": ["skin", "night"], "meta": {"ml": 30}}
    result = await product_repository.create(payload)

    products = await product_repository.list()
    assert len(products) == 1
    assert products[0]["_id"] == result.inserted_id
    assert products[0]["tags"] == ["skin", "night"]
    assert products[0]["meta"] == {"ml": 30}
    assert "_id" not in payload


async def test_delete_by_id_removes_only_that_product(product_repository):
    keep = await _make_product(product_repository, name="Keep")
    drop = await _make_product(product_repository, name="Drop")

    assert await product_repository.delete_by_id(drop) is True

    remaining = await product_repository.list()
    assert [str(p["_id"]) for p in remaining] == [keep]


async def test_delete_missing_product_is_not_found(product_repository):
    await _make_product(product_repository)
    with pytest.raises(NotFoundError):
        await product_repository.delete_by_id(str(ObjectId()))
    assert len(await product_repository.list()) == 1


async def test_delete_with_invalid_id(product_repository):
    with pytest.raises(InvalidIdError):
        await product_repository.delete_by_id("not-an-object-id")


async def test_add_review_appends_in_order(product_repository):
    pid = await _make_product(product_repository)

    first = await product_repository.add_review(pid, "alice", 5, "Great")
    second = await product_repository.add_review(pid, "bob", "3", "Okay")

    reviews = await product_repository.list_reviews(pid)
    assert [r["review_id"] for r in reviews] == [first, second]
    last = reviews[-1]
    assert (last["user"], last["rating"], last["comment"]) == ("bob", 3, "Okay")
    assert last["date"] is not None


@pytest.mark.parametrize(
    "user, rating, comment",
    [("", 5, "text"), ("alice", None, "text"), ("alice", 0, "text"), ("alice", 4, "")],
)
async def test_add_review_missing_fields_leaves_reviews_untouched(product_repository, user, rating, comment):
    pid = await _make_product(product_repository)
    await product_repository.add_review(pid, "alice", 4, "fine")

    with pytest.raises(ValidationError):
        await product_repository.add_review(pid, user, rating, comment)

    assert len(await product_repository.list_reviews(pid)) == 1


async def test_add_review_unknown_product(product_repository):
    with pytest.raises(NotFoundError):
        await product_repository.add_review(str(ObjectId()), "alice", 5, "Great")


async def test_list_reviews_empty_when_none(product_repository):
    pid = await _make_product(product_repository)
    assert await product_repository.list_reviews(pid) == []


async def test_list_reviews_unknown_product(product_repository):
    with pytest.raises(NotFoundError):
        await product_repository.list_reviews(str(ObjectId()))


def test_coerce_rating():
    assert coerce_rating("4") == 4
    assert coerce_rating(4.5) == 4.5
    for bad in ("five", True, float("nan"), [1]):
        with pytest.raises(ValidationError):
            coerce_rating(bad)
