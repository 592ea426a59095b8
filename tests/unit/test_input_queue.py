from typing import List

from burnout.input import KeyEvent, KeyEventQueue


def test_events_delivered_in_order_to_all_handlers() -> None:
    queue = KeyEventQueue()
    first: List[int] = []
    second: List[int] = []
    queue.on_key_down(lambda e: first.append(e.key_code))
    queue.on_key_down(lambda e: second.append(e.key_code))

    queue.push(KeyEvent(1))
    queue.push(KeyEvent(2))
    assert first == []
    assert queue.pump() == 2
    assert first == [1, 2]
    assert second == [1, 2]


def test_event_pushed_by_handler_runs_after_current() -> None:
    queue = KeyEventQueue()
    log: List[str] = []

    def handler(event: KeyEvent) -> None:
        log.append(f"start {event.key_code}")
        if event.key_code == 1:
            queue.key_down(2)
        log.append(f"end {event.key_code}")

    queue.on_key_down(handler)
    queue.key_down(1)
    assert log == ["start 1", "end 1", "start 2", "end 2"]


def test_pump_without_events() -> None:
    assert KeyEventQueue().pump() == 0
