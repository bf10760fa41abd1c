from workout_widget.core.timer import RestTimer, TimerPhase

def test_fresh_timer_is_idle():
    t = RestTimer(90)
    assert t.phase is TimerPhase.idle
    assert (t.time_left, t.is_running) == (90, False)

def test_full_cycle_expires():
    t = RestTimer(90)
    assert t.start()
    for _ in range(90):
        t.tick()
    assert t.phase is TimerPhase.expired
    assert t.time_left == 0
    assert t.is_running is False

def test_ticks_after_expiry_do_nothing():
    t = RestTimer(2)
    t.start()
    t.tick(); t.tick()
    assert t.tick() is False
    assert t.time_left == 0

def test_reset_from_expired_is_idle():
    t = RestTimer(3)
    t.start()
    for _ in range(3):
        t.tick()
    t.reset()
    assert t.phase is TimerPhase.idle
    assert t.time_left == 3

def test_pause_and_resume():
    t = RestTimer(60)
    t.start(); t.tick(); t.tick()
    assert t.pause()
    assert t.phase is TimerPhase.paused
    assert t.tick() is False
    assert t.time_left == 58
    assert t.start()
    t.tick()
    assert t.time_left == 57

def test_pause_before_first_tick_is_idle_again():
    t = RestTimer(60)
    t.start()
    t.pause()
    assert t.phase is TimerPhase.idle

def test_noops():
    t = RestTimer(10)
    assert t.pause() is False          # not running
    assert t.tick() is False           # not running
    t.start()
    assert t.start() is False          # already running
    gen = t.generation
    assert t.start() is False
    assert t.generation == gen

def test_zero_initial_cannot_start():
    t = RestTimer(0)
    assert t.phase is TimerPhase.expired
    assert t.start() is False
    assert t.is_running is False

def test_start_from_expired_is_noop():
    t = RestTimer(1)
    t.start(); t.tick()
    assert t.start() is False

def test_toggle():
    t = RestTimer(30)
    t.toggle()
    assert t.is_running
    t.toggle()
    assert not t.is_running

def test_generation_bumps_per_running_period():
    t = RestTimer(30)
    t.start(); first = t.generation
    t.pause(); t.start()
    assert t.generation == first + 1

def test_reinitialize_drops_countdown():
    t = RestTimer(60)
    t.start(); t.tick()
    assert t.reinitialize(120)
    assert t.phase is TimerPhase.idle
    assert (t.initial, t.time_left, t.is_running) == (120, 120, False)

def test_reinitialize_with_same_value_keeps_state():
    t = RestTimer(60)
    t.start(); t.tick()
    assert t.reinitialize(60) is False
    assert t.is_running and t.time_left == 59
