from __future__ import annotations

from _infra import banner, show

from decoders import array, literal, nullable, number, partial, string, struct

user = struct(
    {
        "id": number,
        "name": string.refine(lambda s: s != "", "expected a non-empty name"),
        "role": literal("admin", "member"),
        "tags": array(string),
        "profile": partial({"bio": nullable(string), "age": number}),
    }
)


def main() -> None:
    banner("01_quickstart: struct + partial + refine + draw")

    show("valid", user.decode({"id": 1, "name": "Ann", "role": "admin", "tags": [], "profile": {}}))
    show(
        "extra key",
        user.decode({"id": 1, "name": "Ann", "role": "member", "tags": ["x"], "profile": {}, "debug": True}),
    )
    show(
        "everything wrong",
        user.decode({"id": "1", "name": "", "role": "root", "tags": [1, "ok", None], "profile": {"age": "x"}}),
    )


if __name__ == "__main__":
    main()
