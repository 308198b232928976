import io

from padmapper.actions import VirtualButtonAction, VirtualButtonType
from padmapper.controller import VirtualController
from padmapper.engine import MappingEngine
from padmapper.profiles import Profile, ProfileManager
from padmapper.rules import InputCondition, MappingRule
from padmapper.service import main, setup_test_mappings


def test_setup_test_mappings_loads_button_a_rule():
    engine = MappingEngine(VirtualController())
    rule = setup_test_mappings(engine)
    assert engine.mappings == (rule,)
    assert rule.condition == InputCondition.on_button_press(0)
    assert rule.actions == [VirtualButtonAction(VirtualButtonType.XBOX_A, True)]


def test_main_processes_reports_and_shuts_down(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("01\n\n00\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Core Service Starting...")
    assert out.rstrip().endswith("Core Service Shutting Down...")


def test_main_reports_invalid_hex(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("zz\n01\n"))
    assert main([]) == 0
    err = capsys.readouterr().err
    assert "Line 1" in err
    assert "'zz'" in err


def test_main_missing_profile_fails(monkeypatch, tmp_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main(["--profile", str(tmp_path / "absent.json")]) == 1
    assert "Failed to load profile" in capsys.readouterr().err


def test_main_loads_profile(monkeypatch, tmp_path, capsys):
    path = tmp_path / "profile.json"
    profile = Profile(
        "racing",
        [
            MappingRule(
                InputCondition.on_button_press(0),
                [VirtualButtonAction(VirtualButtonType.XBOX_A, True)],
            )
        ],
    )
    ProfileManager(MappingEngine(VirtualController())).save_profile(profile, path)
    monkeypatch.setattr("sys.stdin", io.StringIO("01\n"))
    assert main(["--profile", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Loaded profile: racing" in out
    assert "Setting up test mappings" not in out