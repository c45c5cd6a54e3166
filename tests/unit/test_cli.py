import json

import tiktoken

from vtok.cli.main import main


def _run(capsys, *argv):
    code = main(list(argv))
    out = capsys.readouterr().out
    return code, (json.loads(out) if out.strip() else None)


def test_learn_encode_decode(tmp_path, capsys):
    vocab = str(tmp_path / "vocab.json")
    code, payload = _run(capsys, "learn", "--vocab", vocab, "--text", "the cat sat on the mat")
    assert code == 0
    assert payload["vocabSize"] == 10
    assert payload["added"] == 5

    code, payload = _run(capsys, "encode", "--vocab", vocab, "--text", "the dog sat", "--no-boundary")
    assert code == 0
    assert payload["tokens"] == [5, 1, 7]
    assert payload["decoded"] == "the sat"
    assert payload["method"] == "word-level"

    code, payload = _run(capsys, "decode", "--vocab", vocab, "--ids", "2,5,6,99,3", "--keep-special")
    assert payload["decoded"] == "<BOS> the cat <EOS>"


def test_learn_from_file_with_config(tmp_path, capsys):
    vocab = str(tmp_path / "vocab.json")
    corpus = tmp_path / "corpus.txt"
    corpus.write_text("red blue\nred green\n", encoding="utf-8")
    config = tmp_path / "config.yaml"
    config.write_text("min_frequency: 2\n", encoding="utf-8")

    code, payload = _run(capsys, "learn", "--vocab", vocab, "--config", str(config), "--input", str(corpus))
    assert code == 0
    assert payload["vocabSize"] == 6


def test_subword_encoding(tmp_path, capsys):
    vocab = str(tmp_path / "vocab.json")
    _run(capsys, "learn", "--vocab", vocab, "--text", "jump ing")
    code, payload = _run(capsys, "encode", "--vocab", vocab, "--text", "jumping", "--subword")
    assert payload["tokens"] == [2, 5, 6, 3]
    assert payload["method"] == "subword"


def test_external_encoding_falls_back(tmp_path, capsys, monkeypatch):
    def unavailable(name):
        raise KeyError(name)

    monkeypatch.setattr(tiktoken, "encoding_for_model", unavailable)
    monkeypatch.setattr(tiktoken, "get_encoding", unavailable)
    vocab = str(tmp_path / "vocab.json")
    _run(capsys, "learn", "--vocab", vocab, "--text", "hello world")
    code, payload = _run(capsys, "encode", "--vocab", vocab, "--text", "hello world", "--external")
    assert code == 0
    assert payload["tokens"] == [2, 5, 6, 3]
    assert payload["method"] == "word-level"
    assert payload["decoded"] == "<BOS> hello world <EOS>"

    code, payload = _run(capsys, "decode", "--vocab", vocab, "--ids", "5,6", "--external")
    assert code == 0
    assert payload["method"] == "custom"


def test_special_stats_reset(tmp_path, capsys):
    vocab = str(tmp_path / "vocab.json")
    code, payload = _run(capsys, "add-special", "--vocab", vocab, "--token", "<CLS>")
    assert payload["id"] == 5

    code, payload = _run(capsys, "stats", "--vocab", vocab)
    assert payload["vocabSize"] == 6
    assert payload["vocabulary"]["<CLS>"] == 5
    assert payload["specialTokensCount"] == 5

    code, payload = _run(capsys, "reset", "--vocab", vocab)
    assert payload["vocabSize"] == 5


def test_save_and_load_artifact(tmp_path, capsys):
    vocab = str(tmp_path / "vocab.json")
    other = str(tmp_path / "other.json")
    artifact = tmp_path / "artifact"
    _run(capsys, "learn", "--vocab", vocab, "--text", "save me please")
    code, payload = _run(capsys, "save", "--vocab", vocab, "--output", str(artifact))
    assert code == 0
    assert payload["data"]["nextTokenId"] == 8

    code, payload = _run(capsys, "load", "--vocab", other, "--artifact", str(artifact))
    assert code == 0
    assert payload["vocabSize"] == 8


def test_invalid_input_exit_codes(tmp_path, capsys):
    vocab = tmp_path / "vocab.json"
    assert main(["encode", "--vocab", str(vocab), "--text", ""]) == 2
    assert main(["decode", "--vocab", str(vocab), "--ids", "1,x"]) == 2
    assert main(["add-special", "--vocab", str(vocab), "--token", "<X>", "--id", "-2"]) == 1

    vocab.write_text(json.dumps({"vocab": {"a": 5, "b": 5}}), encoding="utf-8")
    assert main(["stats", "--vocab", str(vocab)]) == 1
    assert "error:" in capsys.readouterr().err


def test_whitespace_only_text_encodes_to_boundaries(tmp_path, capsys):
    vocab = str(tmp_path / "vocab.json")
    code, payload = _run(capsys, "encode", "--vocab", vocab, "--text", "   ")
    assert code == 0
    assert payload["tokens"] == [2, 3]
    assert payload["tokenCount"] == 2
