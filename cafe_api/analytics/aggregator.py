from __future__ import annotations

from collections import Counter
from typing import Any

QUERY_EVENT = "cafe_query"
_TOP_N = 10


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    queries = [e for e in events if e["type"] == QUERY_EVENT]
    total = len(queries)

    # Average response time
    times = [q["response_time_ms"] for q in queries if "response_time_ms" in q]
    avg_time = round(sum(times) / len(times), 3) if times else 0.0

    ok = [q for q in queries if q.get("error") is None]

    # Rejections by message
    rejected: Counter[str] = Counter()
    for q in queries:
        if q.get("error") is not None:
            rejected[q["error"]] += 1

    # Top cities, successful queries only
    city_counter: Counter[str] = Counter()
    for q in ok:
        city_counter[q["city"]] += 1
    top_cities = [{"name": n, "count": c} for n, c in city_counter.most_common(_TOP_N)]

    # Top search terms, case-folded so "Кофе" and "кофе" count together
    search_counter: Counter[str] = Counter()
    for q in ok:
        if q.get("search"):
            search_counter[q["search"].casefold()] += 1
    top_searches = [{"name": n, "count": c} for n, c in search_counter.most_common(_TOP_N)]

    empty_results = sum(1 for q in ok if q.get("results_returned") == 0)

    return {
        "total_queries": total,
        "successful": len(ok),
        "rejected": dict(rejected),
        "avg_response_time_ms": avg_time,
        "top_cities": top_cities,
        "top_searches": top_searches,
        "empty_results": empty_results,
    }
