"""Tests for the interactive shell."""

import json

import pytest

from fitness_record.commands.shell import (
    ADD,
    FILTER,
    LOAD,
    QUIT,
    REMOVE,
    SAVE,
    UPDATE,
    VIEW,
    InteractiveShell,
)
from fitness_record.models import Logbook, Muscle


class ScriptedPrompter:
    """Prompter that replays a fixed list of answers."""

    def __init__(self, answers):
        self.answers = list(answers)
        self.questions = []

    def _next(self, message):
        self.questions.append(message)
        if not self.answers:
            raise AssertionError(f"No scripted answer for: {message}")
        return self.answers.pop(0)

    def text(self, message, default=""):
        return self._next(message)

    def select(self, message, choices):
        answer = self._next(message)
        assert answer is None or answer in choices
        return answer

    def confirm(self, message, default=True):
        return self._next(message)


def run_shell(logbook, answers):
    prompter = ScriptedPrompter(answers)
    InteractiveShell(logbook, prompter).run()
    assert prompter.answers == []
    return prompter


class TestInteractiveShell:
    """Tests for InteractiveShell menu actions."""

    def test_quit_on_empty_logbook(self, temp_logbook_path, capsys):
        """Test quitting straight away with no file."""
        logbook = Logbook(temp_logbook_path)
        run_shell(logbook, [QUIT, True])

        assert "Starting fresh" in capsys.readouterr().out
        assert not temp_logbook_path.exists()

    def test_cancel_quit_returns_to_menu(self, temp_logbook_path):
        """Test declining the exit confirmation."""
        logbook = Logbook(temp_logbook_path)
        prompter = run_shell(logbook, [QUIT, False, QUIT, True])
        assert prompter.questions.count("What would you like to do?") == 2

    def test_loads_on_startup(self, sample_logbook, temp_logbook_path):
        """Test existing logs are loaded when the shell starts."""
        sample_logbook.save()
        logbook = Logbook(temp_logbook_path)

        run_shell(logbook, [QUIT, True])

        assert len(logbook.sessions) == 2

    def test_add_exercise_then_save(self, temp_logbook_path, capsys):
        """Test adding an exercise and saving it."""
        logbook = Logbook(temp_logbook_path)
        run_shell(
            logbook,
            [ADD, "bench press", "CHEST", "60", "10", "4", "2025/10/01", SAVE, QUIT, True],
        )

        restored = Logbook(temp_logbook_path)
        restored.load()
        exercise = restored.get_session_by_date("2025/10/01").exercises[0]
        assert exercise.name == "Bench press"
        assert exercise.muscle == Muscle.CHEST
        assert (exercise.weight, exercise.reps, exercise.sets) == (60, 10, 4)

        output = capsys.readouterr().out
        assert "Logs saved successfully!" in output
        assert "Event Log" in output
        assert "Logged Bench press on 2025/10/01" in output

    def test_add_invalid_numbers(self, temp_logbook_path, capsys):
        """Test a non-numeric weight is reported."""
        logbook = Logbook(temp_logbook_path)
        run_shell(logbook, [ADD, "Squat", "LEGS", "heavy", "5", "5", QUIT, True])

        assert logbook.sessions == ()
        assert "valid whole number for weight" in capsys.readouterr().out

    def test_nothing_saved_without_request(self, temp_logbook_path):
        """Test changes are not written unless saved."""
        logbook = Logbook(temp_logbook_path)
        prompter = run_shell(logbook, [ADD, "Squat", "LEGS", "100", "5", "5", "2025/10/03", QUIT, True])

        assert not temp_logbook_path.exists()
        assert "unsaved changes" in prompter.questions[-1]

    def test_remove_exercise(self, sample_logbook, temp_logbook_path, capsys):
        """Test removing an exercise from a date."""
        sample_logbook.save()
        logbook = Logbook(temp_logbook_path)

        run_shell(logbook, [REMOVE, "2025/10/01", "pull up", QUIT, True])

        assert [e.name for e in logbook.sessions[0].exercises] == ["Bench press"]
        assert "removed successfully" in capsys.readouterr().out

    def test_remove_unknown_date(self, temp_logbook_path, capsys):
        """Test removing from a date with no session."""
        logbook = Logbook(temp_logbook_path)
        run_shell(logbook, [REMOVE, "2030/01/01", QUIT, True])
        assert "No workout session found for date: 2030/01/01" in capsys.readouterr().out

    def test_update_weight(self, sample_logbook, temp_logbook_path):
        """Test updating the weight of an exercise."""
        sample_logbook.save()
        logbook = Logbook(temp_logbook_path)

        run_shell(logbook, [UPDATE, "2025/10/03", "squat", "Weight (kg)", "270", QUIT, True])

        assert logbook.sessions[1].exercises[0].weight == 270

    def test_update_rejects_bad_number(self, sample_logbook, temp_logbook_path, capsys):
        """Test a non-numeric reps value is reported."""
        sample_logbook.save()
        logbook = Logbook(temp_logbook_path)

        run_shell(logbook, [UPDATE, "2025/10/03", "squat", "Number of Reps", "lots", QUIT, True])

        assert logbook.sessions[1].exercises[0].reps == 3
        assert "valid whole number for reps" in capsys.readouterr().out

    def test_update_muscle_and_date(self, sample_logbook, temp_logbook_path):
        """Test updating the muscle group and session date."""
        sample_logbook.save()
        logbook = Logbook(temp_logbook_path)

        run_shell(
            logbook,
            [
                UPDATE, "2025/10/01", "bench press", "Muscle Type", "SHOULDERS",
                UPDATE, "2025/10/01", "bench press", "Date yyyy/mm/dd", "2025/10/02",
                QUIT, True,
            ],
        )

        session = logbook.sessions[0]
        assert session.date == "2025/10/02"
        assert session.exercises[0].muscle == Muscle.SHOULDERS

    def test_view_and_filter(self, sample_logbook, temp_logbook_path, capsys):
        """Test viewing all logs and both filters."""
        sample_logbook.save()
        logbook = Logbook(temp_logbook_path)

        run_shell(logbook, [VIEW, FILTER, "Muscle type", "LEGS", FILTER, "Date", "2025/10/01", QUIT, True])

        output = capsys.readouterr().out
        assert "All Workouts" in output
        assert "Workouts for Legs" in output
        assert "Workouts on 2025/10/01" in output

    def test_load_discards_unsaved_changes_after_confirm(self, sample_logbook, temp_logbook_path):
        """Test loading after confirming unsaved changes are dropped."""
        sample_logbook.save()
        logbook = Logbook(temp_logbook_path)

        run_shell(
            logbook,
            [ADD, "Curl", "BICEPS", "15", "12", "3", "2025/10/05", LOAD, True, QUIT, True],
        )

        assert len(logbook.sessions) == 2
        assert logbook.get_session_by_date("2025/10/05") is None

    def test_save_failure_is_reported(self, temp_logbook_path, capsys):
        """Test a failed save is reported."""
        logbook = Logbook(temp_logbook_path.parent / "missing" / "log.json")
        run_shell(logbook, [SAVE, QUIT, True])
        assert "Unable to write logs to the file" in capsys.readouterr().out

    @pytest.mark.parametrize("answer", [None, True])
    def test_interrupt_at_menu_asks_to_quit(self, temp_logbook_path, answer):
        """Test Ctrl-C at the menu goes to the exit confirmation."""
        logbook = Logbook(temp_logbook_path)
        run_shell(logbook, [None, answer])

    def test_update_weight_of_unnamed_exercise(self, temp_logbook_path):
        """Test a stored exercise with an empty name can still be updated."""
        temp_logbook_path.write_text(
            json.dumps(
                [
                    {
                        "date": "2025/10/01",
                        "exercises": [
                            {"exercise name": "", "muscle type": "CHEST", "weight": 2, "sets": 1, "reps": 1},
                        ],
                    }
                ]
            )
        )
        logbook = Logbook(temp_logbook_path)

        run_shell(logbook, [UPDATE, "2025/10/01", "", "Weight (kg)", "50", QUIT, True])

        exercise = logbook.sessions[0].exercises[0]
        assert exercise.name == ""
        assert exercise.weight == 50

    @pytest.mark.parametrize(
        "answers",
        [
            ["Squat", "LEGS", None],
            ["Squat", "LEGS", "100", None],
            ["Squat", "LEGS", "100", "5", None],
        ],
    )
    def test_add_stops_when_a_number_prompt_is_cancelled(self, temp_logbook_path, answers):
        """Test cancelling any number prompt abandons the add without further questions."""
        logbook = Logbook(temp_logbook_path)

        prompter = run_shell(logbook, [ADD, *answers, QUIT, True])

        assert logbook.sessions == ()
        asked = prompter.questions
        assert asked[asked.index("Exercise name") + len(answers)] == "What would you like to do?"
