from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass(frozen=True)
class TokenizerConfig:
    """Defaults for a tokenizer session.

    Per-call arguments always win over these values; the config only fills
    in what a caller (usually the CLI) leaves unset.
    """

    min_frequency: int = 1
    max_subword_length: int = 8
    add_boundary_tokens: bool = True
    remove_special_tokens: bool = True

    # External codec options
    external_model: str = "gpt-3.5-turbo"
    enable_external: bool = True

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "TokenizerConfig":
        known = {f.name for f in fields(TokenizerConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ValueError(f"Unknown tokenizer config keys: {', '.join(unknown)}")
        return TokenizerConfig(**d)

    @staticmethod
    def from_json(s: str) -> "TokenizerConfig":
        return TokenizerConfig.from_dict(json.loads(s))


def load_config(path: Optional[str | Path]) -> TokenizerConfig:
    """Read a YAML config file; a top-level ``tokenizer:`` key is unwrapped."""
    if not path:
        return TokenizerConfig()
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config not found: {config_path}")
    payload = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    if not isinstance(payload, dict):
        raise ValueError("Tokenizer config must be a mapping.")
    if "tokenizer" in payload and isinstance(payload["tokenizer"], dict):
        payload = payload["tokenizer"]
    return TokenizerConfig.from_dict(payload)
