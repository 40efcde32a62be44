from typing import Any, Dict, Optional

USER_FIELDS = ["username", "email", "real_name"]

# 길이 2 미만은 정확히 일치, 2~4는 편집거리 1, 5 이상은 2
USER_FUZZINESS = "AUTO:2,5"


def build_user_query(term: Optional[str], offset: int, size: int) -> Dict[str, Any]:
    return {
        "query": {"multi_match": {"query": term if term is not None else "", "fields": list(USER_FIELDS), "fuzziness": USER_FUZZINESS}},
        "from": offset,
        "size": size,
    }
