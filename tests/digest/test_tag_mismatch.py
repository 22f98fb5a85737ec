"""Static checks: digests of different entity kinds do not mix without transmute_tag.

These run mypy over small snippets; the rejection is a type error, not a
runtime check, so it cannot be asserted any other way.
"""

from pathlib import Path

import pytest

import ledger_digest

mypy_api = pytest.importorskip("mypy.api")

PROJECT_ROOT = Path(ledger_digest.__file__).resolve().parent.parent

HEADER = """\
from ledger_digest import Digest, TypedDigest

class Block: ...
class Transaction: ...

block_hash: TypedDigest[Block] = Digest.new(b"block").typed(Block)
other_block_hash: TypedDigest[Block] = Digest.new(b"other").typed(Block)
tx_hash: TypedDigest[Transaction] = Digest.new(b"tx").typed(Transaction)
"""


def _run_mypy(tmp_path: Path, body: str) -> tuple[str, int]:
    config = tmp_path / "mypy.ini"
    config.write_text(
        "[mypy]\n"
        f"mypy_path = {PROJECT_ROOT}\n"
        "follow_imports = silent\n"
        "strict_equality = True\n"
        "\n"
        "[mypy-prefect.*]\n"
        "follow_imports = skip\n"
    )
    snippet = tmp_path / "snippet.py"
    snippet.write_text(HEADER + body)
    stdout, _stderr, status = mypy_api.run(
        [str(snippet), "--config-file", str(config), "--no-incremental", "--show-error-codes"]
    )
    return stdout, status


def _line_of(body: str, marker: str) -> int:
    for offset, line in enumerate(body.splitlines(), start=1):
        if marker in line:
            return HEADER.count("\n") + offset
    raise AssertionError(f"{marker!r} not in snippet")


class TestTagMismatch:
    def test_same_tag_comparisons_type_check(self, tmp_path: Path) -> None:
        body = (
            "assert block_hash != other_block_hash\n"
            "assert block_hash < other_block_hash or block_hash >= other_block_hash\n"
            "assert tx_hash.transmute_tag(Block) != block_hash\n"
            "assert block_hash.digest != tx_hash.digest\n"
        )
        stdout, status = _run_mypy(tmp_path, body)
        assert status == 0, stdout

    def test_cross_tag_comparisons_rejected(self, tmp_path: Path) -> None:
        body = (
            "block_hash == tx_hash  # eq\n"
            "block_hash != tx_hash  # ne\n"
            "block_hash < tx_hash  # lt\n"
            "wrong: TypedDigest[Transaction] = block_hash  # assign\n"
        )
        stdout, status = _run_mypy(tmp_path, body)
        assert status == 1, stdout
        for marker in ("# eq", "# ne", "# lt", "# assign"):
            assert f"snippet.py:{_line_of(body, marker)}: error" in stdout, stdout
