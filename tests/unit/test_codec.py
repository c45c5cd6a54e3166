from vtok.tokenization.codec import decode, encode
from vtok.tokenization.learner import learn
from vtok.tokenization.normalize import clean_text
from vtok.tokenization.vocab import Vocabulary


def _vocab():
    return learn(Vocabulary.create(), "the cat sat on the mat", 1).vocabulary


def test_unknown_words_become_unk():
    vocab = _vocab()
    the, sat = vocab.lookup_id("the"), vocab.lookup_id("sat")
    assert encode(vocab, "the dog sat", add_boundary_tokens=False) == [the, 1, sat]


def test_boundary_tokens_bracket_sequence():
    vocab = _vocab()
    assert encode(vocab, "The cat!") == [2, vocab.lookup_id("the"), vocab.lookup_id("cat"), 3]


def test_empty_text_encoding():
    vocab = _vocab()
    assert encode(vocab, "", add_boundary_tokens=True) == [2, 3]
    assert encode(vocab, "", add_boundary_tokens=False) == []


def test_decode_skips_unmapped_ids_and_keeps_specials():
    vocab = Vocabulary.create()
    assert decode(vocab, [0, 1, 2, 99, 3], remove_special_tokens=False) == "<PAD> <UNK> <BOS> <EOS>"


def test_decode_removes_specials():
    vocab = _vocab()
    ids = encode(vocab, "the cat sat", add_boundary_tokens=True)
    assert decode(vocab, ids + [4, 0], remove_special_tokens=True) == "the cat sat"


def test_custom_special_tokens_survive_removal():
    vocab = _vocab()
    cls_id = vocab.insert("<CLS>")
    assert decode(vocab, [cls_id, 2, vocab.lookup_id("cat")]) == "<CLS> cat"


def test_known_text_round_trips_to_normalized_form():
    vocab = _vocab()
    text = "The MAT, on the cat... sat!"
    ids = encode(vocab, text, add_boundary_tokens=False)
    assert decode(vocab, ids, remove_special_tokens=True) == clean_text(text)
