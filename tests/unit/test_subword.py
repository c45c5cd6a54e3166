from vtok.tokenization.learner import learn
from vtok.tokenization.subword import encode_subword, segment_word
from vtok.tokenization.vocab import Vocabulary


def _vocab(text):
    return learn(Vocabulary.create(), text, 1).vocabulary


def test_known_word_is_emitted_whole():
    vocab = _vocab("play ing playing")
    assert encode_subword(vocab, "playing", add_boundary_tokens=False) == [vocab.lookup_id("playing")]


def test_unknown_word_uses_longest_known_pieces():
    vocab = _vocab("play ing er p")
    assert segment_word(vocab, "playing") == ["play", "ing"]
    ids = encode_subword(vocab, "playing player", add_boundary_tokens=False)
    assert ids == [
        vocab.lookup_id("play"),
        vocab.lookup_id("ing"),
        vocab.lookup_id("play"),
        vocab.lookup_id("er"),
    ]


def test_pieces_never_overlap():
    vocab = _vocab("ab bc")
    assert segment_word(vocab, "abc") == ["ab", "c"]
    assert encode_subword(vocab, "abc", add_boundary_tokens=False) == [vocab.lookup_id("ab"), 1]


def test_uncovered_characters_become_unk():
    vocab = _vocab("play")
    assert segment_word(vocab, "xplay") == ["x", "play"]
    assert encode_subword(vocab, "xplay", add_boundary_tokens=False) == [1, vocab.lookup_id("play")]
    assert encode_subword(vocab, "zz", add_boundary_tokens=False) == [1, 1]


def test_candidates_limited_to_max_length():
    vocab = _vocab("abcdefghi")
    assert encode_subword(vocab, "abcdefghij", add_boundary_tokens=False) == [1] * 10
    assert segment_word(vocab, "abcdefghij", max_length=9) == ["abcdefghi", "j"]


def test_boundary_tokens_wrap_subword_sequence():
    vocab = _vocab("play")
    assert encode_subword(vocab, "plays") == [2, vocab.lookup_id("play"), 1, 3]
    assert encode_subword(vocab, "") == [2, 3]
