import pytest

from vtok.errors import MalformedVocabulary
from vtok.tokenization.io import load_record, load_tokenizer, read_json, save_record, save_tokenizer
from vtok.tokenization.learner import learn
from vtok.tokenization.vocab import Vocabulary


def test_save_load(tmp_path):
    vocab = learn(Vocabulary.create(), "a b", 1).vocabulary
    paths = save_tokenizer(tmp_path, vocab, metadata={"name": "test"})
    assert [p.name for p in paths] == ["vocab.json", "manifest.json"]

    loaded, manifest = load_tokenizer(tmp_path)
    assert loaded == vocab
    assert manifest["vocab_size"] == 7
    assert manifest["metadata"] == {"name": "test"}
    assert "vocab.json" in manifest["files"]


def test_load_without_manifest(tmp_path):
    save_tokenizer(tmp_path, Vocabulary.create())
    (tmp_path / "manifest.json").unlink()
    loaded, manifest = load_tokenizer(tmp_path)
    assert loaded == Vocabulary.create()
    assert manifest == {}


def test_record_file_round_trip(tmp_path):
    path = tmp_path / "nested" / "vocab.json"
    assert load_record(path) == Vocabulary.create()

    vocab = learn(Vocabulary.create(), "x y z", 1).vocabulary
    save_record(path, vocab)
    assert read_json(path)["nextTokenId"] == 8
    assert load_record(path) == vocab


def test_record_files_are_written_sorted_with_trailing_newline(tmp_path):
    path = tmp_path / "vocab.json"
    save_record(path, Vocabulary.create())
    text = path.read_text(encoding="utf-8")
    assert text.endswith("}\n")
    assert text.index('"nextTokenId"') < text.index('"specialTokens"') < text.index('"vocab"')
    assert read_json(path)["nextTokenId"] == 5


def test_corrupt_record_file_is_malformed(tmp_path):
    path = tmp_path / "vocab.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MalformedVocabulary, match="not valid JSON"):
        load_record(path)
