"""On-disk tokenizer artifacts: the vocabulary record plus a manifest."""

from __future__ import annotations

import hashlib
import json
from datetime import datetime, timezone
from pathlib import Path

from vtok.errors import MalformedVocabulary
from vtok.tokenization.serialize import deserialize, serialize
from vtok.tokenization.vocab import Vocabulary
from vtok.utils.logging import get_logger

logger = get_logger(__name__)

FORMAT_VERSION = 1
VOCAB_FILE = "vocab.json"
MANIFEST_FILE = "manifest.json"


def write_json(path: Path, payload: dict[str, object]) -> None:
    path.write_text(json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n", encoding="utf-8")


def read_json(path: Path) -> dict[str, object]:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise MalformedVocabulary(f"{path} is not valid JSON: {exc}") from exc


def sha256_file(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()


def save_tokenizer(
    output_dir: Path,
    vocab: Vocabulary,
    metadata: dict[str, object] | None = None,
) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    vocab_path = output_dir / VOCAB_FILE
    manifest_path = output_dir / MANIFEST_FILE

    write_json(vocab_path, serialize(vocab))

    manifest = {
        "format_version": FORMAT_VERSION,
        "created_at": datetime.now(timezone.utc).isoformat(timespec="seconds"),
        "vocab_size": len(vocab),
        "metadata": metadata or {},
        "files": {VOCAB_FILE: sha256_file(vocab_path)},
    }
    write_json(manifest_path, manifest)
    logger.info("Saved tokenizer artifact (%d tokens) to %s", len(vocab), output_dir)
    return [vocab_path, manifest_path]


def load_tokenizer(artifact_dir: Path) -> tuple[Vocabulary, dict[str, object]]:
    vocab_path = artifact_dir / VOCAB_FILE
    manifest_path = artifact_dir / MANIFEST_FILE

    vocab = deserialize(read_json(vocab_path))
    manifest = read_json(manifest_path) if manifest_path.exists() else {}
    expected = (manifest.get("files") or {}).get(VOCAB_FILE)  # type: ignore[union-attr]
    if expected and expected != sha256_file(vocab_path):
        logger.warning("%s does not match the checksum recorded in %s", vocab_path, manifest_path)
    return vocab, manifest


def save_record(path: Path, vocab: Vocabulary) -> None:
    """Write just the vocabulary record to a single JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    write_json(path, serialize(vocab))


def load_record(path: Path) -> Vocabulary:
    """Read a vocabulary record file; a missing file yields a fresh vocabulary."""
    if not path.exists():
        logger.debug("%s not found; starting from an empty vocabulary", path)
        return Vocabulary.create()
    return deserialize(read_json(path))
