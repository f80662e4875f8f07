"""Tests for duplicate reporting and review panel summaries."""

from dedup.duplicate_report import report, summarize_group, summarize_groups
from dedup.models import ApplicationRecord


def rec(id, name="Ali Karimov", dob="1990-01-01", phone=""):
    return ApplicationRecord(id=id, full_name=name, date_of_birth=dob, phone=phone)


class TestReport:
    def test_drops_singletons(self):
        clusters = [[rec(1), rec(2)], [rec(3)], [rec(4), rec(5), rec(6)]]
        groups, duplicate_ids = report(clusters)
        assert [[r.id for r in g] for g in groups] == [[1, 2], [4, 5, 6]]
        assert duplicate_ids == {1, 2, 4, 5, 6}

    def test_every_id_in_exactly_one_group(self):
        clusters = [[rec(1), rec(2)], [rec(3), rec(4)], [rec(5)]]
        groups, duplicate_ids = report(clusters)
        for record_id in duplicate_ids:
            assert sum(1 for g in groups for r in g if r.id == record_id) == 1

    def test_empty(self):
        groups, duplicate_ids = report([])
        assert groups == []
        assert duplicate_ids == set()


class TestSummarizeGroup:
    def test_headline_is_first_member(self):
        group = [rec(1, "Ali Karimov"), rec(2, "Karimov Ali")]
        summary = summarize_group(group)
        assert summary["full_name"] == "Ali Karimov"
        assert summary["date_of_birth"] == "1990-01-01"
        assert summary["size"] == 2

    def test_preview_limited(self):
        """Three members, two previewed, size still three."""
        group = [rec(1), rec(2), rec(3)]
        summary = summarize_group(group, preview_size=2)
        assert summary["size"] == 3
        assert [m["id"] for m in summary["members"]] == [1, 2]

    def test_missing_values_filled(self):
        group = [rec(1, name="", dob="", phone=""), rec(2, name="", dob="", phone="+998901234567")]
        summary = summarize_group(group, missing_value="-")
        assert summary["full_name"] == "-"
        assert summary["date_of_birth"] == "-"
        assert summary["members"][0]["phone"] == "-"
        assert summary["members"][1]["phone"] == "+998901234567"

    def test_summarize_groups(self):
        groups = [[rec(1), rec(2)], [rec(3, "Botir Nazarov"), rec(4, "Nazarov Botir")]]
        summaries = summarize_groups(groups)
        assert [s["full_name"] for s in summaries] == ["Ali Karimov", "Botir Nazarov"]
