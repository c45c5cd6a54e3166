"""Tokenization core: normalizer, vocabulary store, learner and codecs."""

from vtok.tokenization.codec import decode, encode
from vtok.tokenization.external import ExternalCodec, NullCodec, TiktokenCodec
from vtok.tokenization.learner import LearnResult, learn, learn_iter
from vtok.tokenization.normalize import clean_text, normalize
from vtok.tokenization.serialize import deserialize, serialize
from vtok.tokenization.special import SpecialToken
from vtok.tokenization.subword import encode_subword, segment_word
from vtok.tokenization.tokenizer import VocabTokenizer, VocabularyStats
from vtok.tokenization.vocab import Vocabulary

__all__ = [
    "SpecialToken",
    "Vocabulary",
    "normalize",
    "clean_text",
    "learn",
    "learn_iter",
    "LearnResult",
    "encode",
    "decode",
    "encode_subword",
    "segment_word",
    "ExternalCodec",
    "NullCodec",
    "TiktokenCodec",
    "serialize",
    "deserialize",
    "VocabTokenizer",
    "VocabularyStats",
]
