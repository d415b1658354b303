"""
Tests for the workout plan command-line script.
"""
import json

from scripts.workout_plan_cli import main


def test_text_output(capsys):
    assert main(["--weight", "90", "--height", "180"]) == 0
    out = capsys.readouterr().out
    assert "BMI: 27.8 (Overweight)" in out
    assert "Goal: lose (suggested: lose)" in out
    assert "Estimated duration: 25 weeks" in out
    assert "-12.2 kg" in out


def test_json_output_with_explicit_goal(capsys):
    assert main(["--weight", "90", "--height", "180", "--goal", "fit", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["suggested_goal"] == "lose"
    assert data["plan"]["goal"] == "fit"
    assert data["plan"]["estimated_weeks"] == 12


def test_invalid_input(capsys):
    assert main(["--weight", "0", "--height", "180"]) == 2
    assert "Weight must be a positive number." in capsys.readouterr().err
