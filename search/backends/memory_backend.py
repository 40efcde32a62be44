import re
import threading
from typing import Any, Dict, List

from ..exceptions import EngineError
from .base import SearchBackend

_TOKEN_RE = re.compile(r"\w+", re.UNICODE)


def _tokens(text) -> List[str]:
    return _TOKEN_RE.findall(str(text or "").lower())


def _max_edits(fuzziness, token: str) -> int:
    # "AUTO", "AUTO:low,high", 또는 정수
    if fuzziness is None:
        return 0
    f = str(fuzziness).upper()
    if f.startswith("AUTO"):
        low, high = 3, 6
        if ":" in f:
            low, high = (int(x) for x in f.split(":", 1)[1].split(","))
        if len(token) < low:
            return 0
        return 1 if len(token) < high else 2
    return int(f)


def _distance(a: str, b: str) -> int:
    # Damerau-Levenshtein (optimal string alignment), 엔진 기본값처럼 인접 전치를 1회로 센다
    d = [[0] * (len(b) + 1) for _ in range(len(a) + 1)]
    for i in range(len(a) + 1):
        d[i][0] = i
    for j in range(len(b) + 1):
        d[0][j] = j
    for i in range(1, len(a) + 1):
        for j in range(1, len(b) + 1):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(d[i - 1][j] + 1, d[i][j - 1] + 1, d[i - 1][j - 1] + cost)
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + 1)
    return d[len(a)][len(b)]


class InMemoryBackend(SearchBackend):
    """Process-local stand-in for the engine.

    Understands the `multi_match` queries this service sends: word tokenization, lower-casing,
    fuzzy term matching and best-field scoring. Hits come back in score order, ties in insertion order.
    """

    def __init__(self):
        self.indices: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def ping(self) -> None: ...

    # Index lifecycle
    def index_exists(self, name: str) -> bool:
        return name in self.indices

    def create_index(self, name: str) -> None:
        with self._lock:
            self.indices.setdefault(name, [])

    def drop_index(self, name: str) -> None:
        with self._lock:
            self.indices.pop(name, None)

    # Indexing
    def index_document(self, name: str, source: Dict[str, Any]) -> None:
        with self._lock:
            # 엔진처럼 쓰기 시 인덱스 자동 생성
            self.indices.setdefault(name, []).append(dict(source))

    # Searching
    def _score(self, doc, tokens, fields, fuzziness) -> int:
        best = 0
        for field in fields:
            words = _tokens(doc.get(field))
            score = sum(1 for t in tokens if any(_distance(t, w) <= _max_edits(fuzziness, t) for w in words))
            best = max(best, score)
        return best

    def search(self, name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        if name not in self.indices:
            raise EngineError(f"index_not_found_exception: no such index [{name}]")
        mm = (body.get("query") or {}).get("multi_match")
        if mm is None:
            raise EngineError("parsing_exception: only multi_match queries are supported")

        tokens = _tokens(mm.get("query"))
        fields = mm.get("fields") or []
        with self._lock:
            docs = list(self.indices[name])

        scored = [(self._score(d, tokens, fields, mm.get("fuzziness")), i, d) for i, d in enumerate(docs)]
        rows = sorted((s for s in scored if s[0] > 0), key=lambda s: (-s[0], s[1]))

        start = body.get("from", 0)
        end = start + body.get("size", 10)
        hits = [{"_index": name, "_score": float(score), "_source": d} for score, _, d in rows[start:end]]
        return {"hits": {"total": {"value": len(rows)}, "hits": hits}}
