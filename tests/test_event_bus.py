from lightsout.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", row=2, col=3)

    assert received == {"row": 2, "col": 3}


def test_emit_without_subscribers_is_a_no_op():
    EventBus().emit("nobody_listens", value=1)


def test_bound_methods_stay_subscribed_without_external_reference():
    bus = EventBus()
    seen = []

    class Listener:
        def on_event(self, sender, **kwargs):
            seen.append(kwargs["value"])

    bus.subscribe("ping", Listener().on_event)
    bus.emit("ping", value=5)

    assert seen == [5]
