'''
Query parameters shared by the WhatsUp Gold device and device group report endpoints.
'''
from datetime import datetime, timezone

REPORT_RANGES = ('today', 'lastPolled', 'yesterday', 'lastWeek', 'lastMonth', 'lastQuarter', 'weekToDate',
                 'monthToDate', 'quarterToDate', 'lastNSeconds', 'lastNMinutes', 'lastNHours', 'lastNDays',
                 'lastNWeeks', 'lastNMonths', 'custom')

#Report name -> endpoint slug under devices/{id}/reports/ and device-groups/{id}/devices/reports/
DEVICE_REPORTS = {
    'cpu': 'cpu-utilization',
    'memory': 'memory-utilization',
    'disk': 'disk-utilization',
    'disk-free-space': 'disk-free-space',
    'interface': 'interface-utilization',
    'interface-traffic': 'interface-traffic',
    'interface-errors': 'interface-errors',
    'interface-discards': 'interface-discards',
    'ping-availability': 'ping-availability',
    'ping-response-time': 'ping-response-time',
    'state-change': 'state-change',
    'maintenance': 'maintenance',
}

SORT_DIRECTIONS = ('asc', 'desc')


def report_endpoint(report: str) -> str:
    '''
    Returns the endpoint slug for a report name. Slugs are accepted as-is.
    '''
    if report in DEVICE_REPORTS:
        return DEVICE_REPORTS[report]
    if report in DEVICE_REPORTS.values():
        return report
    raise ValueError(f'Unknown report {report!r}. Expected one of: {", ".join(sorted(DEVICE_REPORTS))}')


def format_utc(value):
    '''
    ISO-8601 UTC string for a datetime. Naive datetimes are taken as UTC; strings pass through.
    '''
    if isinstance(value, datetime):
        if value.tzinfo:
            value = value.astimezone(timezone.utc)
        return value.strftime('%Y-%m-%dT%H:%M:%SZ')
    return value


def _flag(value):
    if isinstance(value, bool):
        return str(value).lower()
    return value


def build_report_params(range: str = 'today', range_start_utc=None, range_end_utc=None, range_n: int = None,
                        sort_by: str = None, sort_by_dir: str = None, group_by: str = None, group_by_dir: str = None,
                        apply_threshold: bool = None, over_threshold: bool = None, threshold_value: float = None,
                        business_hours_id: int = None, rollup_by_device: bool = None, limit: int = None) -> dict:
    '''
    Builds the query string for a report request. Unset parameters are left out so the server defaults apply.

    range_start_utc and range_end_utc accept datetimes or preformatted strings and are required when range is
    'custom'. The lastN* ranges require range_n.
    '''
    if range not in REPORT_RANGES:
        raise ValueError(f'Unknown report range {range!r}.')
    if range == 'custom' and (range_start_utc is None or range_end_utc is None):
        raise ValueError('A custom range needs both range_start_utc and range_end_utc.')
    if range.startswith('lastN') and range_n is None:
        raise ValueError(f'Range {range!r} needs range_n.')
    for direction in (sort_by_dir, group_by_dir):
        if direction is not None and direction not in SORT_DIRECTIONS:
            raise ValueError(f'Sort direction must be "asc" or "desc", not {direction!r}.')
    params = {
        'range': range,
        'rangeStartUtc': format_utc(range_start_utc),
        'rangeEndUtc': format_utc(range_end_utc),
        'rangeN': range_n,
        'sortBy': sort_by,
        'sortByDir': sort_by_dir,
        'groupBy': group_by,
        'groupByDir': group_by_dir,
        'applyThreshold': _flag(apply_threshold),
        'overThreshold': _flag(over_threshold),
        'thresholdValue': threshold_value,
        'businessHoursId': business_hours_id,
        'rollupByDevice': _flag(rollup_by_device),
        'limit': limit,
    }
    return {key: value for key, value in params.items() if value is not None}
