"""Selection sharing through the URL fragment, e.g. ``#v=v1&holds=1,5,12``."""

from __future__ import annotations

from collections.abc import Iterable

VERSION_PARAM = "v"
HOLDS_PARAM = "holds"


def encode_fragment(hold_ids: Iterable[int], version: str) -> str:
    """Fragment for a selection; empty string when nothing is selected."""
    ids = sorted(set(hold_ids))
    if not ids:
        return ""
    return f"#{VERSION_PARAM}={version}&{HOLDS_PARAM}={','.join(str(i) for i in ids)}"


def decode_fragment(fragment: str) -> tuple[str | None, set[int]]:
    """(version, hold ids) from a fragment. Malformed ids are skipped."""
    fragment = fragment.removeprefix("#")
    if not fragment.strip():
        return None, set()

    params: dict[str, str] = {}
    for part in fragment.split("&"):
        key, _, value = part.partition("=")
        params[key] = value

    version = params.get(VERSION_PARAM)
    raw_ids = params.get(HOLDS_PARAM)
    if raw_ids is None:
        return version, set()

    ids: set[int] = set()
    for token in raw_ids.split(","):
        try:
            ids.add(int(token))
        except ValueError:
            continue
    return version, ids
