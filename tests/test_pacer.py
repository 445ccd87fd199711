from gridsnake.pacer import FramePacer


class Recorder:
    def __init__(self, interval=100.0):
        self.ticks = 0
        self.renders = 0
        self.value = interval

    def tick(self):
        self.ticks += 1

    def render(self):
        self.renders += 1

    def interval(self):
        return self.value


def make(interval=100.0):
    rec = Recorder(interval)
    return rec, FramePacer(rec.tick, rec.interval, rec.render)


def test_idle_until_started():
    rec, pacer = make()
    assert not pacer.on_frame(0)
    assert not pacer.on_frame(1000)
    assert rec.ticks == 0


def test_first_frame_only_arms_timer():
    rec, pacer = make()
    pacer.start()
    assert not pacer.on_frame(5000)
    assert rec.ticks == 0
    assert pacer.last_tick == 5000


def test_ticks_at_interval():
    rec, pacer = make(100)
    pacer.start()
    fired = [pacer.on_frame(t) for t in (0, 16, 50, 99, 100, 116, 199, 216)]
    assert fired == [False, False, False, False, True, False, False, True]
    assert rec.ticks == 2 and rec.renders == 2
    assert pacer.last_tick == 216


def test_interval_reread_each_frame():
    rec, pacer = make(100)
    pacer.start()
    pacer.on_frame(0)
    rec.value = 40
    assert pacer.on_frame(40)
    assert not pacer.on_frame(70)


def test_resume_does_not_fast_forward():
    rec, pacer = make(100)
    pacer.start()
    pacer.on_frame(0)
    pacer.on_frame(100)
    pacer.stop()
    assert not pacer.on_frame(5000)
    pacer.start()
    assert not pacer.on_frame(10_000)
    assert rec.ticks == 1
    assert pacer.on_frame(10_100)


def test_stale_ticket_is_ignored():
    rec, pacer = make(10)
    old = pacer.start()
    pacer.on_frame(0, old)
    pacer.stop()
    new = pacer.start()
    assert new != old
    pacer.on_frame(0, new)
    assert not pacer.on_frame(50, old)
    assert pacer.on_frame(50, new)
    assert rec.ticks == 1


def test_stop_is_idempotent():
    _, pacer = make()
    gen = pacer.start()
    pacer.stop()
    pacer.stop()
    assert pacer.generation == gen + 1
    assert not pacer.active


def test_stop_inside_tick_prevents_next_tick():
    rec = Recorder(10)
    pacer = None

    def tick():
        rec.tick()
        pacer.stop()

    pacer = FramePacer(tick, rec.interval, rec.render)
    pacer.start()
    pacer.on_frame(0)
    assert pacer.on_frame(10)
    assert not pacer.on_frame(20)
    assert rec.ticks == 1
    assert rec.renders == 1
