from __future__ import annotations

from datetime import time

import pytest

from attendance_reconciler.compliance.classifier import ComplianceClassifier
from attendance_reconciler.compliance.model import ComplianceFlags

H = 60


@pytest.mark.parametrize(
    "first_in, late, super_late",
    [
        (time(10, 30), False, False),
        (time(10, 31), True, False),
        (time(10, 45), True, False),
        (time(10, 46), False, True),
        (None, False, False),
    ],
)
def test_late_checkin_bands(first_in, late, super_late):
    flags = ComplianceClassifier().classify(9 * H, 9 * H, first_in)

    assert flags.late_checkin is late
    assert flags.super_late_checkin is super_late


def test_no_data_day_is_not_insufficient():
    flags = ComplianceClassifier().classify(0, 0, None)

    assert flags.no_data_day
    assert not flags.insufficient_hours
    assert flags.raised() == ["no_data_day"]


def test_insufficient_hours_with_some_data():
    flags = ComplianceClassifier().classify(7 * H, 0, time(10, 0))

    assert flags.insufficient_hours
    assert flags.less_than_8h_office
    assert not flags.no_data_day
    assert not flags.outside_office_work


def test_outside_office_work():
    flags = ComplianceClassifier().classify(2 * H, 8 * H, time(10, 0))

    assert flags.outside_office_work
    assert not flags.insufficient_hours


def test_super_late_compound_flags():
    classifier = ComplianceClassifier()

    low_work = classifier.classify(8 * H, 7 * H, time(11, 0))
    good_work = classifier.classify(8 * H, 8 * H, time(11, 0))
    short_office = classifier.classify(7 * H, 8 * H, time(11, 0))

    assert low_work.super_late_with_office_but_low_work
    assert not low_work.super_late_with_office_and_good_work
    assert good_work.super_late_with_office_and_good_work
    assert not good_work.super_late_with_office_but_low_work
    assert not short_office.super_late_with_office_and_good_work
    assert not short_office.super_late_with_office_but_low_work


def test_full_compliant_day_raises_nothing():
    assert ComplianceClassifier().classify(9 * H, 8 * H, time(9, 55)) == ComplianceFlags()
