from __future__ import annotations

from jsonlens import InspectConfig, JsonLens

LOG = """\
2024-05-02 10:14:03 INFO  request {"method": "GET", "path": "/users", "query": {"page": 2}}
2024-05-02 10:14:04 WARN  retry payload={id: 17 "attempt": 3}
2024-05-02 10:14:05 ERROR response body truncated: {"error": {"code": 503, "detail": "upstream
"""


def main() -> None:
    config = InspectConfig(per_line=True, max_chars=2000)
    lens = JsonLens(config)

    result = lens.inspect(LOG)
    for fragment in result.fragments:
        print(fragment.kind, fragment.start_offset, fragment.tree.has_errors())

    print(lens.render_report(LOG))


if __name__ == "__main__":
    main()
