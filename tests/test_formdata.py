import pytest

from encoder import File, FormData, is_file, is_form_data


@pytest.fixture(scope="function")
def form() -> FormData:
    return FormData()


def test_form_data_append_keeps_every_value(form: FormData):
    form.append("field", "first")
    form.append("field", "second")
    assert form.get_all("field") == ["first", "second"]
    assert form.get("field") == "first"
    assert len(form) == 2


def test_form_data_set_replaces_in_place(form: FormData):
    form.append("a", "1")
    form.append("b", "2")
    form.append("a", "3")
    form.set("a", "4")
    assert list(form) == [("a", "4"), ("b", "2")]


def test_form_data_set_appends_missing_name(form: FormData):
    form.set("a", "1")
    assert list(form.entries()) == [("a", "1")]


def test_form_data_coerces_values_to_string(form: FormData):
    form.append("number", 42)
    assert form.get("number") == "42"


def test_form_data_delete(form: FormData):
    form.append("a", "1")
    form.append("b", "2")
    form.delete("a")
    assert not form.has("a")
    assert list(form.keys()) == ["b"]
    assert list(form.values()) == ["2"]


def test_form_data_missing_name(form: FormData):
    assert form.get("missing") is None
    assert form.get_all("missing") == []


def test_form_data_wraps_binary_values(form: FormData):
    form.append("blob", b"content")
    form.append("named", bytearray(b"content"), "file.bin")
    blob, named = form.values()
    assert isinstance(blob, File) and blob.name == "blob"
    assert isinstance(named, File) and named.name == "file.bin"


def test_form_data_filename_turns_text_into_file(form: FormData):
    form.append("file", "content", "file.txt")
    value = form.get("file")
    assert is_file(value)
    assert value.name == "file.txt"
    assert value.size == len(b"content")


def test_form_data_renames_file(form: FormData):
    file = File([b"content"], "original.txt", type="text/plain")
    form.append("file", file, "renamed.txt")
    value = form.get("file")
    assert is_file(value)
    assert value.name == "renamed.txt"
    assert value.type == "text/plain"
    assert value.size == file.size
    assert file.name == "original.txt", "The original file must not be changed."


def test_form_data_keeps_file_as_is(form: FormData):
    file = File([b"content"], "file.txt")
    form.append("file", file)
    form.append("same", file, "file.txt")
    assert form.get("file") is file
    assert form.get("same") is file


def test_form_data_entries_are_a_snapshot(form: FormData):
    form.append("a", "1")
    entries = form.entries()
    form.append("b", "2")
    assert list(entries) == [("a", "1")]


def test_file_metadata():
    file = File(["Some ", b"text"], "file.txt", type="TEXT/Plain", last_modified=1000)
    assert file.name == "file.txt"
    assert file.type == "text/plain"
    assert file.size == 9
    assert file.last_modified == 1000


def test_file_default_metadata():
    file = File([], "empty")
    assert file.type == ""
    assert file.size == 0
    assert file.last_modified > 0


@pytest.mark.asyncio
async def test_file_stream():
    file = File([b"Some ", b"text"], "file.txt")
    assert [piece async for piece in file.stream()] == [b"Some ", b"text"]
    assert await file.read() == b"Some text"


def test_is_file():
    assert is_file(File([], "file.txt"))
    assert not is_file("file.txt")
    assert not is_file(b"content")
    assert not is_file(None)


def test_is_form_data(form: FormData):
    assert is_form_data(form)
    assert not is_form_data({"field": "value"})
    assert not is_form_data([("field", "value")])
    assert not is_form_data(None)
