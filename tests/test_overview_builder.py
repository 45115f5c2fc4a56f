"""Tests for the Organisation Information overview derivations."""

from datetime import date
from decimal import Decimal

from workbook_app.documents.org_info import (
    EmploymentPosition,
    OrgInfoDocument,
    QualificationCourseRow,
)
from workbook_app.services.overview_builder import (
    build_employee_stats,
    build_overview,
    tally_programme_types,
)


def _quals(*types):
    return [QualificationCourseRow(type=t) for t in types]


class TestProgrammeTally:
    def test_canonical_first_then_extras_alphabetical(self):
        tally = tally_programme_types(_quals(
            "Diploma", "zeta custom", "short course (non credit)", "Alpha custom", "DIPLOMA",
        ))
        assert [t.name for t in tally] == [
            "short course (non credit)", "Diploma", "Alpha custom", "zeta custom",
        ]
        assert [t.quantity for t in tally] == [1, 2, 1, 1]
        assert all(t.offered for t in tally)

    def test_blank_types_ignored(self):
        assert tally_programme_types(_quals(None, "  ")) == []


class TestEmployeeStats:
    def test_no_positions_no_rows(self):
        assert build_employee_stats([]) == []

    def test_total_and_race_rows(self):
        positions = [
            EmploymentPosition(african={"m": 2, "md": 1, "f": 1}),
            EmploymentPosition(white={"f": 3, "fd": 1}),
        ]
        stats = build_employee_stats(positions)
        assert [r.group for r in stats] == ["Total", "African", "Coloured", "Indian", "White"]

        total = stats[0]
        assert total.employ == 8
        assert total.disabled == 2
        assert total.d_percent == Decimal("25.0")
        assert total.male_percent == Decimal("25.0")
        assert total.male_disabled_percent == Decimal("12.5")
        assert total.female_percent == Decimal("50.0")

        african = stats[1]
        assert african.employ == 4
        assert african.male_percent == Decimal("50.0")
        assert african.female_disabled_percent == Decimal("0.0")

        coloured = stats[2]
        assert coloured.employ == 0
        assert coloured.male_percent is None

    def test_percent_rounds_half_up_to_one_place(self):
        stats = build_employee_stats([EmploymentPosition(indian={"m": 1, "f": 2})])
        assert stats[0].male_percent == Decimal("33.3")
        assert stats[0].female_percent == Decimal("66.7")


class TestBuildOverview:
    def _document(self):
        return OrgInfoDocument.model_validate({
            "section1": {"registered_accredited_since": "2015-06-01"},
            "board": {"directors": [{"surname": "Dlamini"}, {"surname": "Naidoo"}]},
            "campuses": {"sites": [
                {"province": "Western Cape"},
                {"province": "Gauteng"},
                {"province": ""},
                {"province": "Gauteng"},
            ]},
            "qualifications": {"items": [
                {"type": "Diploma", "mode_of_delivery": "Full-time in person",
                 "registered_accredited_status": "Accredited"},
                {"type": "Skills Programmme", "mode_of_delivery": "Blended",
                 "registered_accredited_status": "accredited"},
            ]},
        })

    def test_derived_sections(self):
        doc = self._document()
        overview = build_overview(doc, today=date(2025, 6, 2))

        assert overview.section1.years_reg_accredited == "10"
        assert overview.section1.board_of_directors == "2"
        assert overview.section1.campuses_sites == "4"

        assert [(p.name, p.count) for p in overview.section3.active_provinces] == [
            ("(Unspecified)", 1), ("Gauteng", 2), ("Western Cape", 1),
        ]
        assert [q.name for q in overview.section3.qualifications] == ["Skills Programmme", "Diploma"]

        assert overview.section4.full_time_in_person is True
        assert overview.section4.blended_learning is True
        assert overview.section4.distance_learning is False

    def test_user_values_win(self):
        doc = self._document()
        doc.section1.board_of_directors = "7"
        doc.section4.distance_learning = True
        overview = build_overview(doc, today=date(2025, 6, 2))
        assert overview.section1.board_of_directors == "7"
        assert overview.section4.distance_learning is True

    def test_stored_document_untouched(self):
        doc = self._document()
        build_overview(doc, today=date(2025, 6, 2))
        assert doc.section1.years_reg_accredited is None
        assert doc.section3.qualifications == []

    def test_student_totals(self):
        doc = OrgInfoDocument.model_validate({
            "student_historical": {"rows": [
                {"african": {"m": 5, "f": 3, "fd": 1}, "total": 9, "sc": 4, "pr": 2, "di": 1},
            ]},
            "student_current": {
                "period_from": "2024-01-01",
                "period_to": "2024-12-31",
                "rows": [{"white": {"m": 2}, "ip": 2}],
            },
        })

        overview = build_overview(doc, today=date(2025, 1, 1))
        s5 = overview.section5
        assert (s5.enrolled, s5.male, s5.female, s5.disabled) == (9, 5, 3, 1)
        assert s5.successful_completion == 4

        s7 = overview.section7
        assert s7.enrolled == 2
        assert s7.in_process == 2
        assert s7.period_text == "2024-01-01 to 2024-12-31"
