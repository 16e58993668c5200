"""
Tests for igc_parser.py record classification and track building
"""
import pytest
from datetime import date, datetime, time
from igc_parser import (
    IgcHeaderParser,
    IgcPositionParser,
    IgcRecordClassifier,
    TrackBuilder,
    foldRecord,
    parseLine,
    buildTrack
)
from igc_model import (
    FixRecord,
    HeaderKind,
    HeaderRecord,
    LatLng,
    MalformedRecordError,
    MissingFlightDateError,
    ParsedLine,
    RecordKind
)

FIX_LINE = 'B2311514647828N12025941WA0083900950'


class TestIgcHeaderParser:
    """Tests for IgcHeaderParser"""

    def test_date_header(self):
        assert IgcHeaderParser.classify_header('HFDTE161119') == HeaderRecord.of_date(date(2019, 11, 16))

    def test_date_header_with_trailing_text(self):
        header = IgcHeaderParser.classify_header('HFDTE090525XX')
        assert header.kind == HeaderKind.DATE
        assert header.date == date(2025, 5, 9)

    def test_date_header_from_any_source(self):
        # Only columns 2..5 are inspected, the source letter is ignored
        assert IgcHeaderParser.classify_header('HPDTE161119').date == date(2019, 11, 16)

    def test_pilot_header_is_other(self):
        assert IgcHeaderParser.classify_header('HFPLTPILOT:Test Pilot') == HeaderRecord.other()

    @pytest.mark.parametrize('line', ['H', 'HF', 'HFDT'])
    def test_short_header_is_malformed(self, line):
        with pytest.raises(MalformedRecordError):
            IgcHeaderParser.classify_header(line)

    def test_date_header_century(self):
        assert IgcHeaderParser.classify_header('HFDTE010169').date == date(2069, 1, 1)
        assert IgcHeaderParser.classify_header('HFDTE010170').date == date(1970, 1, 1)

    def test_invalid_date(self):
        with pytest.raises(MalformedRecordError):
            IgcHeaderParser.classify_header('HFDTE321119')

    def test_truncated_date(self):
        with pytest.raises(MalformedRecordError):
            IgcHeaderParser.classify_header('HFDTE1611')

    def test_long_form_date_header_is_rejected(self):
        with pytest.raises(MalformedRecordError):
            IgcHeaderParser.classify_header('HFDTEDATE:161119,01')


class TestIgcPositionParser:
    """Tests for IgcPositionParser"""

    def test_parse_fix(self):
        fix = IgcPositionParser.classify_fix(FIX_LINE)
        assert fix == FixRecord(
            timestamp=time(23, 11, 51),
            pos=LatLng(lat=46 * 60000 + 47828, lng=120 * 60000 + 25941),
            alt_baro=839,
            alt_gps=950,
            validity='A'
        )

    def test_validity_flag_is_not_checked(self):
        fix = IgcPositionParser.classify_fix('B2311514647828N12025941WV0083900950')
        assert fix.validity == 'V'
        assert fix.alt_baro == 839

    def test_south_east_fix(self):
        fix = IgcPositionParser.classify_fix('B1214283352000S01822000EA0010000120')
        assert fix.pos.lat == -(33 * 60000 + 52000)
        assert fix.pos.lng == -(18 * 60000 + 22000)

    def test_extensions_are_ignored(self):
        fix = IgcPositionParser.classify_fix(FIX_LINE + '0123456')
        assert fix.alt_gps == 950

    def test_negative_altitude(self):
        fix = IgcPositionParser.classify_fix('B2311514647828N12025941WA-0010-0005')
        assert fix.alt_baro == -10
        assert fix.alt_gps == -5

    def test_short_line(self):
        with pytest.raises(MalformedRecordError):
            IgcPositionParser.classify_fix(FIX_LINE[:34])

    def test_invalid_time(self):
        with pytest.raises(MalformedRecordError):
            IgcPositionParser.classify_fix('B2511514647828N12025941WA0083900950')

    def test_non_numeric_latitude(self):
        with pytest.raises(MalformedRecordError):
            IgcPositionParser.classify_fix('B23115146X7828N12025941WA0083900950')

    def test_non_numeric_altitude(self):
        with pytest.raises(MalformedRecordError):
            IgcPositionParser.classify_fix('B2311514647828N12025941WA00839009X0')


class TestIgcRecordClassifier:
    """Tests for IgcRecordClassifier"""

    def test_header_line(self):
        parsed = IgcRecordClassifier().classify_line('HFDTE161119')
        assert parsed == ParsedLine.of_header(HeaderRecord.of_date(date(2019, 11, 16)))

    def test_fix_line(self):
        parsed = IgcRecordClassifier().classify_line(FIX_LINE)
        assert parsed.kind == RecordKind.FIX
        assert parsed.fix.alt_gps == 950
        assert parsed.header is None

    @pytest.mark.parametrize("line", [
        'AXCS001',
        'LXCSCOMMENT',
        'GABCDEF',
        'I033638FXA',
        'C0000000N00000000ETURN',
        'b2311514647828N12025941WA0083900950',
        ' HFDTE161119',
        '',
    ])
    def test_other_lines(self, line):
        assert IgcRecordClassifier().classify_line(line) == ParsedLine.other()

    def test_line_endings_are_stripped(self):
        parsed = IgcRecordClassifier().classify_line('HFDTE161119\r\n')
        assert parsed.header.date == date(2019, 11, 16)

        parsed = IgcRecordClassifier().classify_line(FIX_LINE + '\n')
        assert parsed.fix.alt_gps == 950

    def test_newline_only_is_other(self):
        assert IgcRecordClassifier().classify_line('\n').kind == RecordKind.OTHER

    def test_parseLine_function(self):
        assert parseLine(FIX_LINE).kind == RecordKind.FIX

    def test_short_header_line_is_fatal(self):
        with pytest.raises(MalformedRecordError):
            parseLine('HFD')

        with pytest.raises(MalformedRecordError):
            parseLine('HF\r\n')


class TestFoldRecord:
    """Tests for the single fold step"""

    def test_date_header_sets_date(self):
        parsed = parseLine('HFDTE161119')
        assert foldRecord(None, parsed) == (date(2019, 11, 16), None)

    def test_date_header_replaces_date(self):
        parsed = parseLine('HFDTE170119')
        new_date, point = foldRecord(date(2019, 11, 16), parsed)
        assert new_date == date(2019, 1, 17)
        assert point is None

    def test_other_header_keeps_date(self):
        parsed = parseLine('HFPLTPILOT:Test Pilot')
        assert foldRecord(date(2019, 11, 16), parsed) == (date(2019, 11, 16), None)

    def test_other_line_keeps_date(self):
        assert foldRecord(date(2019, 11, 16), ParsedLine.other()) == (date(2019, 11, 16), None)
        assert foldRecord(None, ParsedLine.other()) == (None, None)

    def test_fix_with_date(self):
        flight_date, point = foldRecord(date(2019, 11, 16), parseLine(FIX_LINE))
        assert flight_date == date(2019, 11, 16)
        assert point.time == datetime(2019, 11, 16, 23, 11, 51)
        assert point.alt_baro == 839
        assert point.alt_gps == 950
        assert abs(point.lat - 46.797133) < 1e-5
        assert abs(point.lng - 120.43235) < 1e-4

    def test_fix_without_date(self):
        with pytest.raises(MissingFlightDateError) as excinfo:
            foldRecord(None, parseLine(FIX_LINE), 7)
        assert excinfo.value.line_number == 7


class TestTrackBuilder:
    """Tests for TrackBuilder"""

    def test_build_track(self, sample_igc_content):
        builder = TrackBuilder()
        points = list(builder.build_track(sample_igc_content.splitlines(keepends=True)))

        assert len(points) == 2
        assert points[0].time == datetime(2019, 11, 16, 23, 11, 51)
        assert points[1].time == datetime(2019, 11, 16, 23, 11, 52)
        assert points[1].lat == 45.5
        assert points[1].lng == 120.25
        assert points[1].alt_baro == 840
        assert points[1].alt_gps == 951
        assert points[1].validity == 'V'

    def test_stats(self, sample_igc_content):
        builder = TrackBuilder()
        list(builder.build_track(sample_igc_content.splitlines()))

        assert builder.stats.lines == 7
        assert builder.stats.headers == 2
        assert builder.stats.fixes == 2
        assert builder.stats.others == 3
        assert builder.stats.flight_date == date(2019, 11, 16)
        assert builder.stats.first_time == datetime(2019, 11, 16, 23, 11, 51)
        assert builder.stats.last_time == datetime(2019, 11, 16, 23, 11, 52)

    def test_last_date_header_wins(self):
        lines = [
            'HFDTE161119',
            FIX_LINE,
            'HFDTE170119',
            'B0001024647828N12025941WA0083900950',
        ]
        points = list(buildTrack(lines))
        assert points[0].time == datetime(2019, 11, 16, 23, 11, 51)
        assert points[1].time == datetime(2019, 1, 17, 0, 1, 2)

    def test_unrecognized_lines_do_not_touch_date(self):
        lines = ['HFDTE161119', 'LXCSHFDTE010101', 'X', FIX_LINE]
        points = list(buildTrack(lines))
        assert len(points) == 1
        assert points[0].time.date() == date(2019, 11, 16)

    def test_fix_before_date_header(self):
        lines = ['AXCS001', FIX_LINE, 'HFDTE161119']
        with pytest.raises(MissingFlightDateError) as excinfo:
            list(buildTrack(lines))
        assert excinfo.value.line_number == 2

    def test_malformed_line_reports_line_number(self):
        lines = ['HFDTE161119', FIX_LINE, 'B2311']
        builder = TrackBuilder()
        track = builder.build_track(lines)

        assert next(track).alt_gps == 950
        with pytest.raises(MalformedRecordError) as excinfo:
            next(track)
        assert excinfo.value.line_number == 3
        assert excinfo.value.line == 'B2311'
        assert 'line 3' in str(excinfo.value)

    def test_track_is_lazy(self):
        lines = iter(['HFDTE161119', FIX_LINE, 'B-not-a-fix', 'HFDTE999999'])
        track = buildTrack(lines)

        point = next(track)
        assert point.time == datetime(2019, 11, 16, 23, 11, 51)
        # Only the first two lines were consumed
        assert next(lines) == 'B-not-a-fix'

    def test_empty_input(self):
        builder = TrackBuilder()
        assert list(builder.build_track([])) == []
        assert builder.stats.fixes == 0
        assert builder.stats.flight_date is None

    def test_headers_only(self):
        builder = TrackBuilder()
        assert list(builder.build_track(['AXCS001', 'HFDTE161119'])) == []
        assert builder.stats.flight_date == date(2019, 11, 16)
