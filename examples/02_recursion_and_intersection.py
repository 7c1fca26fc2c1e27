from __future__ import annotations

from _infra import banner, show

from decoders import array, intersect, lazy, literal, number, string, struct, sum_

comment = lazy(
    "Comment",
    lambda: struct({"author": string, "text": string, "replies": array(comment)}),
)

event = sum_("type")(
    {
        "click": struct({"type": literal("click"), "x": number, "y": number}),
        "key": struct({"type": literal("key"), "code": string}),
    }
)

# each side only knows part of the fields, pruning removes the cross-talk
timestamped_event = intersect(event, struct({"ts": number}).intersect(struct({"type": string})))


def main() -> None:
    banner("02: lazy + sum_ + intersect")

    show(
        "thread",
        comment.decode(
            {"author": "a", "text": "hi", "replies": [{"author": "b", "text": 1, "replies": []}]}
        ),
    )
    show("click", event.decode({"type": "click", "x": 1, "y": 2}))
    show("unknown event", event.decode({"type": "scroll"}))
    show("timestamped", timestamped_event.decode({"type": "key", "code": "Enter", "ts": 1700000000}))
    show("timestamped extra", timestamped_event.decode({"type": "key", "code": "Enter", "ts": 1, "x": 0}))


if __name__ == "__main__":
    main()
