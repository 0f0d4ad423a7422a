"""Tests for command encoding, numeric coercion and BMI."""

import logging

import pytest

from webhook.encoder import (
    bmi,
    bmi_category,
    encode_chat,
    encode_habit,
    encode_physique,
    format_number,
)
from webhook.models import HabitRecord, MeasurementRecord, coerce_number


class TestHabitEncoding:
    def test_command_has_five_fields_in_order(self):
        params = encode_habit(HabitRecord(study=1, project=0, sport=True, social=False, note="good day"))

        assert params["message"] == "-msg 1,0,1,0,good day"
        assert params["message"][len("-msg "):].split(",") == ["1", "0", "1", "0", "good day"]
        assert params["navigate"] == 0
        assert params["type"] == "habit"

    def test_empty_note_still_yields_five_fields(self):
        params = encode_habit(HabitRecord())

        assert params["message"] == "-msg 0,0,0,0,"
        assert len(params["message"][len("-msg "):].split(",")) == 5

    @pytest.mark.parametrize("bad", [2, -1, "yes", 0.5])
    def test_flags_must_be_zero_or_one(self, bad):
        with pytest.raises(ValueError):
            HabitRecord(study=bad)

    def test_comma_in_note_is_sent_unescaped_and_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="webhook.encoder"):
            params = encode_habit(HabitRecord(1, 1, 1, 1, "gym, then cinema"))

        assert params["message"] == "-msg 1,1,1,1,gym, then cinema"
        assert "comma" in caplog.text


class TestPhysiqueEncoding:
    def test_command_has_eight_fields_in_order(self):
        record = MeasurementRecord(75, 180, 80.5, 35, 100, 110, 95, "weekly")
        params = encode_physique(record)

        assert params["message"] == "-msr 75,180,80.5,35,100,110,95,weekly"
        assert len(params["message"][len("-msr "):].split(",")) == 8
        assert params["navigate"] == 2
        assert params["type"] == "physique"

    def test_unparsable_numbers_default_to_zero(self):
        record = MeasurementRecord("75.2", None, "", "abc", float("nan"), "110", True, "")

        assert (record.weight, record.height, record.waist, record.neck) == (75.2, 0, 0, 0)
        assert (record.hip, record.shoulder, record.chest) == (0, 110, 0)
        assert encode_physique(record)["message"] == "-msr 75.2,0,0,0,0,110,0,"


class TestChatEncoding:
    def test_chat_is_prefixed_and_has_no_type(self):
        params = encode_chat("how was my week?")

        assert params == {"message": "-chat how was my week?", "navigate": 1}


@pytest.mark.parametrize(
    "value, expected",
    [
        (75.0, "75"),
        (75.5, "75.5"),
        (0, "0"),
        (0.1, "0.1"),
        (1e-05, "0.00001"),
        (-0.25, "-0.25"),
        (1e-12, "0"),
        (1e16, "10000000000000000"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


def test_coerce_number_accepts_decimal_comma():
    assert coerce_number("80,5") == 80.5


class TestBmi:
    def test_formula(self):
        assert bmi(70, 175) == pytest.approx(70 / 1.75 ** 2)

    @pytest.mark.parametrize("weight, height", [(0, 180), (70, 0), (-5, 180), (70, -1)])
    def test_zero_for_non_positive_inputs(self, weight, height):
        assert bmi(weight, height) == 0

    @pytest.mark.parametrize(
        "value, category",
        [(0, ""), (17.0, "Underweight"), (22.9, "Normal"), (27.5, "Overweight"), (31.2, "Obese")],
    )
    def test_category(self, value, category):
        assert bmi_category(value) == category


def test_tiny_measurement_stays_in_plain_decimal():
    message = encode_physique(MeasurementRecord(weight=0.00001, height=180))["message"]

    assert message == "-msr 0.00001,180,0,0,0,0,0,"
    assert "e" not in message[len("-msr "):]
