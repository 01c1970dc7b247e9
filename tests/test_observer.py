import io

from patternkit.observer import (
    CurrentConditionsDisplay,
    Observer,
    ThirdPartyDisplay,
    WeatherData,
    run,
)


class Recorder(Observer):
    def __init__(self):
        self.seen = []

    def update(self, temperature, humidity):
        self.seen.append((temperature, humidity))


def test_registered_observer_receives_measurement():
    data = WeatherData()
    recorder = Recorder()
    data.register_observer(recorder)
    data.set_measurements(12.5, 40.0)
    assert recorder.seen == [(12.5, 40.0)]
    assert (data.temperature, data.humidity) == (12.5, 40.0)


def test_unregistered_observer_hears_nothing():
    data = WeatherData()
    recorder = Recorder()
    data.register_observer(recorder)
    data.unregister_observer(recorder)
    data.set_measurements(3.0, 4.0)
    assert recorder.seen == []
    assert data.observers == ()


def test_duplicate_registration_notifies_twice_and_unregister_removes_all():
    data = WeatherData()
    recorder = Recorder()
    data.register_observer(recorder)
    data.register_observer(recorder)
    data.set_measurements(1.0, 2.0)
    assert recorder.seen == [(1.0, 2.0), (1.0, 2.0)]
    data.unregister_observer(recorder)
    assert recorder not in data.observers


def test_none_observer_is_skipped():
    data = WeatherData()
    recorder = Recorder()
    data.register_observer(None)
    data.register_observer(recorder)
    data.set_measurements(5.0, 6.0)
    assert recorder.seen == [(5.0, 6.0)]


def test_displays_register_themselves_in_order():
    data = WeatherData()
    current = CurrentConditionsDisplay(data)
    third = ThirdPartyDisplay(data)
    assert data.observers == (current, third)


def test_display_update_prints_lines(capsys):
    data = WeatherData()
    display = CurrentConditionsDisplay(data)
    lines = display.update(21.5, 55.0)
    assert lines == [
        "CurrentConditionsDisplay::Temperatur: 21.5",
        "CurrentConditionsDisplay::Humidity: 55",
    ]
    assert capsys.readouterr().out.splitlines() == lines


def test_run_measurement_reaches_both_displays(capsys):
    data = run(io.StringIO("m"))
    out = capsys.readouterr().out.splitlines()
    assert sum(line.startswith("CurrentConditionsDisplay::") for line in out) == 2
    assert sum(line.startswith("ThirdPartyDisplay::") for line in out) == 2
    assert "ThirdPartyDisplay::Temperatur: 0" in out
    assert (data.temperature, data.humidity) == (0.0, 20.0)


def test_run_unregistering_third_party_silences_it(capsys):
    run(io.StringIO("Tm"))
    out = capsys.readouterr().out.splitlines()
    assert not any(line.startswith("ThirdPartyDisplay::") for line in out)
    assert sum(line.startswith("CurrentConditionsDisplay::") for line in out) == 2


def test_run_reregistering_restores_display(capsys):
    data = run(io.StringIO("CcmX"))
    out = capsys.readouterr().out.splitlines()
    assert sum(line.startswith("CurrentConditionsDisplay::") for line in out) == 2
    assert [type(o).__name__ for o in data.observers] == [
        "ThirdPartyDisplay",
        "CurrentConditionsDisplay",
    ]


def test_run_measurements_increase_each_time():
    data = run(io.StringIO("mmm"))
    assert data.humidity - data.temperature == 20.0
    assert data.temperature == 2.0