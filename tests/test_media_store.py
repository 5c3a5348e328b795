import pytest

from church_portal_api.app.services.media_store import MediaStore


@pytest.fixture
def store(tmp_path):
    media = MediaStore(str(tmp_path / "uploads"), "uploads/")
    media.ensure_directory()
    return media


async def test_store_keeps_extension_and_writes_bytes(store):
    key = await store.store(b"hello", "Picture.JPEG")
    assert key.endswith(".jpeg")
    assert store.path_for(key).read_bytes() == b"hello"
    assert store.url_for(key) == f"/uploads/{key}"


async def test_keys_are_unique_for_back_to_back_uploads(store):
    keys = {await store.store(b"x", "a.png") for _ in range(20)}
    assert len(keys) == 20


async def test_file_without_extension(store):
    key = await store.store(b"x", "README")
    assert "." not in key


async def test_delete_is_idempotent(store):
    key = await store.store(b"bye", "a.txt")
    await store.delete(key)
    assert not store.path_for(key).exists()
    await store.delete(key)
    await store.delete(None)
    await store.delete("")


async def test_delete_stays_inside_upload_dir(store, tmp_path):
    outside = tmp_path / "keep.txt"
    outside.write_text("keep")
    await store.delete("../keep.txt")
    assert outside.exists()


def test_url_for_empty_key(store):
    assert store.url_for(None) is None
    assert store.url_for("") is None
