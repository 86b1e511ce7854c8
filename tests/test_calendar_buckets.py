import unittest
from datetime import date, timedelta

from workschedule.models.enums import Granularity, SortKey, WorkItemType
from workschedule.schemas.project import ProjectOut
from workschedule.schemas.recurring_task import RecurringTaskOut
from workschedule.schemas.work_item import WorkItem
from workschedule.schemas.work_order import WorkOrderOut
from workschedule.services.calendar_buckets import bucket_work_items, is_active_on, sort_work_items
from workschedule.services.work_items import build_work_items


def _item(item_id: str, item_type: WorkItemType, start: date | None, end: date | None = None, **extra) -> WorkItem:
    return WorkItem(
        id=item_id,
        type=item_type,
        title=extra.pop("title", item_id),
        customer=extra.pop("customer", "Metro"),
        status=extra.pop("status", "active"),
        start_date=start,
        end_date=end,
        **extra,
    )


class TestBucketRanges(unittest.TestCase):
    def test_day_has_single_key(self) -> None:
        buckets = bucket_work_items([], date(2025, 1, 21), Granularity.DAY)
        self.assertEqual(list(buckets), ["2025-01-21"])
        self.assertEqual(buckets["2025-01-21"], [])

    def test_week_is_monday_to_friday(self) -> None:
        # 2025-01-21 is a Tuesday.
        buckets = bucket_work_items([], date(2025, 1, 21), Granularity.WEEK)
        self.assertEqual(
            list(buckets),
            ["2025-01-20", "2025-01-21", "2025-01-22", "2025-01-23", "2025-01-24"],
        )

    def test_week_from_sunday_goes_back_to_previous_monday(self) -> None:
        buckets = bucket_work_items([], date(2025, 1, 5), Granularity.WEEK)
        self.assertEqual(list(buckets)[0], "2024-12-30")
        self.assertEqual(len(buckets), 5)

    def test_week_keys_are_consecutive(self) -> None:
        for offset in range(14):
            selected = date(2025, 3, 1) + timedelta(days=offset)
            with self.subTest(selected=selected):
                keys = [date.fromisoformat(k) for k in bucket_work_items([], selected, Granularity.WEEK)]
                self.assertEqual(keys[0].weekday(), 0)
                self.assertLessEqual(keys[0], selected)
                self.assertEqual(keys, [keys[0] + timedelta(days=i) for i in range(5)])

    def test_month_grid_is_42_days_from_sunday(self) -> None:
        buckets = bucket_work_items([], date(2025, 1, 21), Granularity.MONTH)
        keys = list(buckets)
        self.assertEqual(len(keys), 42)
        self.assertEqual(keys[0], "2024-12-29")
        self.assertEqual(keys[-1], "2025-02-08")
        self.assertEqual(date.fromisoformat(keys[0]).weekday(), 6)

    def test_month_starting_on_sunday_has_no_lead_in(self) -> None:
        # June 2025 begins on a Sunday.
        keys = list(bucket_work_items([], date(2025, 6, 15), Granularity.MONTH))
        self.assertEqual(keys[0], "2025-06-01")


class TestDateMatching(unittest.TestCase):
    def test_project_covers_full_range(self) -> None:
        project = _item("p1", WorkItemType.PROJECT, date(2025, 1, 1), date(2025, 1, 5))
        buckets = bucket_work_items([project], date(2025, 1, 1), Granularity.MONTH)
        hits = [key for key, items in buckets.items() if items]
        self.assertEqual(hits, ["2025-01-01", "2025-01-02", "2025-01-03", "2025-01-04", "2025-01-05"])

    def test_project_without_end_is_single_day(self) -> None:
        project = _item("p1", WorkItemType.PROJECT, date(2025, 1, 3))
        self.assertTrue(is_active_on(project, date(2025, 1, 3)))
        self.assertFalse(is_active_on(project, date(2025, 1, 4)))

    def test_work_order_is_point_event_even_with_completed_date(self) -> None:
        work_order = _item("w1", WorkItemType.WORK_ORDER, date(2025, 1, 3), date(2025, 1, 5))
        buckets = bucket_work_items([work_order], date(2025, 1, 1), Granularity.MONTH)
        hits = [key for key, items in buckets.items() if items]
        self.assertEqual(hits, ["2025-01-03"])

    def test_recurring_job_is_point_event(self) -> None:
        job = _item("r1", WorkItemType.RECURRING_JOB, date(2025, 1, 3), date(2025, 12, 31))
        self.assertTrue(is_active_on(job, date(2025, 1, 3)))
        self.assertFalse(is_active_on(job, date(2025, 1, 4)))

    def test_missing_start_date_matches_nothing(self) -> None:
        broken = _item("w9", WorkItemType.WORK_ORDER, None)
        buckets = bucket_work_items([broken], date(2025, 1, 1), Granularity.MONTH)
        self.assertTrue(all(items == [] for items in buckets.values()))

    def test_project_with_unreadable_end_date_matches_nothing(self) -> None:
        project = ProjectOut.model_validate(
            {"id": "p9", "name": "Broken", "status": "active", "startDate": "2025-01-03", "endDate": "not-a-date"}
        )
        items = build_work_items([project], [], [])
        buckets = bucket_work_items(items, date(2025, 1, 1), Granularity.MONTH)
        self.assertEqual([key for key, hits in buckets.items() if hits], [])

    def test_project_with_blank_end_date_is_single_day(self) -> None:
        project = ProjectOut.model_validate(
            {"id": "p8", "name": "One day", "status": "active", "startDate": "2025-01-03", "endDate": ""}
        )
        items = build_work_items([project], [], [])
        buckets = bucket_work_items(items, date(2025, 1, 1), Granularity.MONTH)
        self.assertEqual([key for key, hits in buckets.items() if hits], ["2025-01-03"])

    def test_end_to_end_scenario(self) -> None:
        projects = [
            ProjectOut.model_validate(
                {"id": "p1", "name": "Campus", "status": "active", "startDate": "2025-01-01", "endDate": "2025-01-10"}
            )
        ]
        work_orders = [
            WorkOrderOut.model_validate({"id": "w1", "title": "Install", "status": "scheduled", "scheduledDate": "2025-01-05"})
        ]
        recurring = [
            RecurringTaskOut.model_validate(
                {
                    "id": "r1",
                    "title": "Mowing",
                    "frequency": "weekly",
                    "startDate": "2024-12-01",
                    "nextOccurrence": "2025-01-05",
                }
            )
        ]
        items = build_work_items(projects, work_orders, recurring)

        fifth = bucket_work_items(items, date(2025, 1, 5), Granularity.DAY)
        self.assertEqual([i.id for i in fifth["2025-01-05"]], ["p1", "w1", "r1"])

        sixth = bucket_work_items(items, date(2025, 1, 6), Granularity.DAY)
        self.assertEqual([i.id for i in sixth["2025-01-06"]], ["p1"])


class TestSortWorkItems(unittest.TestCase):
    def setUp(self) -> None:
        self.items = [
            _item("a", WorkItemType.WORK_ORDER, date(2025, 1, 9), customer="zeta", priority="low", estimated_duration=1),
            _item("b", WorkItemType.WORK_ORDER, None, customer="Alpha", priority="critical"),
            _item("c", WorkItemType.PROJECT, date(2025, 1, 2), customer="beta", priority=None, estimated_duration=8),
            _item("d", WorkItemType.RECURRING_JOB, date(2025, 1, 5), customer="Gamma", priority="high", estimated_duration=2),
        ]

    def _ids(self, sort_by: SortKey) -> list[str]:
        return [i.id for i in sort_work_items(self.items, sort_by)]

    def test_sort_by_date_puts_undated_last(self) -> None:
        self.assertEqual(self._ids(SortKey.DATE), ["c", "d", "a", "b"])

    def test_sort_by_priority_puts_critical_first(self) -> None:
        # Missing priority ("c") ranks with low and keeps its place after "a".
        self.assertEqual(self._ids(SortKey.PRIORITY), ["b", "d", "a", "c"])

    def test_sort_by_priority_ranks_unknown_with_low(self) -> None:
        items = [
            _item("x", WorkItemType.WORK_ORDER, date(2025, 1, 1), priority="urgent"),
            _item("y", WorkItemType.WORK_ORDER, date(2025, 1, 1), priority="low"),
            _item("z", WorkItemType.WORK_ORDER, date(2025, 1, 1), priority="Critical"),
        ]
        self.assertEqual([i.id for i in sort_work_items(items, SortKey.PRIORITY)], ["z", "x", "y"])

    def test_sort_by_customer_ignores_case(self) -> None:
        self.assertEqual(self._ids(SortKey.CUSTOMER), ["b", "c", "d", "a"])

    def test_sort_by_duration_descending(self) -> None:
        self.assertEqual(self._ids(SortKey.DURATION), ["c", "d", "a", "b"])

    def test_sort_returns_new_list(self) -> None:
        result = sort_work_items(self.items)
        self.assertIsNot(result, self.items)
        self.assertEqual([i.id for i in self.items], ["a", "b", "c", "d"])


if __name__ == "__main__":
    unittest.main()
