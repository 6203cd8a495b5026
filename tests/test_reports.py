# -*- coding: utf-8 -*-
"""
Tests for wugal/reports.py: report names and query string building.
"""
from datetime import datetime, timedelta, timezone

import pytest

from wugal.reports import DEVICE_REPORTS, REPORT_RANGES, build_report_params, format_utc, report_endpoint


def test_defaults_to_today():
    assert build_report_params() == {'range': 'today'}


def test_parameters_are_camel_cased():
    params = build_report_params(range='lastNHours', range_n=6, sort_by='avg', sort_by_dir='desc',
                                 group_by='deviceName', business_hours_id=2, limit=100)
    assert params == {'range': 'lastNHours', 'rangeN': 6, 'sortBy': 'avg', 'sortByDir': 'desc',
                      'groupBy': 'deviceName', 'businessHoursId': 2, 'limit': 100}


def test_booleans_are_lowercased():
    params = build_report_params(apply_threshold=True, over_threshold=False, rollup_by_device=True)
    assert params['applyThreshold'] == 'true'
    assert params['overThreshold'] == 'false'
    assert params['rollupByDevice'] == 'true'


def test_custom_range_formats_datetimes():
    start = datetime(2024, 4, 1, 0, 0)
    end = datetime(2024, 4, 2, 2, 0, tzinfo=timezone(timedelta(hours=2)))
    params = build_report_params(range='custom', range_start_utc=start, range_end_utc=end)
    assert params['rangeStartUtc'] == '2024-04-01T00:00:00Z'
    assert params['rangeEndUtc'] == '2024-04-02T00:00:00Z'


def test_custom_range_needs_both_ends():
    with pytest.raises(ValueError):
        build_report_params(range='custom', range_start_utc='2024-04-01T00:00:00Z')


@pytest.mark.parametrize("range_", [r for r in REPORT_RANGES if r.startswith('lastN')])
def test_last_n_ranges_need_n(range_):
    with pytest.raises(ValueError):
        build_report_params(range=range_)


def test_unknown_range():
    with pytest.raises(ValueError):
        build_report_params(range='fortnight')


def test_bad_sort_direction():
    with pytest.raises(ValueError):
        build_report_params(sort_by='avg', sort_by_dir='up')


def test_format_utc_passes_strings_through():
    assert format_utc('2024-04-01T00:00:00Z') == '2024-04-01T00:00:00Z'
    assert format_utc(None) is None


@pytest.mark.parametrize("name,slug", [
    ('cpu', 'cpu-utilization'),
    ('interface', 'interface-utilization'),
    ('ping-response-time', 'ping-response-time'),
    ('memory-utilization', 'memory-utilization'),
])
def test_report_endpoint(name, slug):
    assert report_endpoint(name) == slug


def test_report_endpoint_unknown():
    with pytest.raises(ValueError) as info:
        report_endpoint('temperature')
    assert 'cpu' in str(info.value)


def test_every_report_has_a_slug():
    assert len(set(DEVICE_REPORTS.values())) == len(DEVICE_REPORTS)
