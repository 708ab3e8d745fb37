from datetime import date

from django.http import QueryDict
from django.test import SimpleTestCase

from jobs.services import JobSearchEngine, JobSearchFilters


def ids(jobs):
    return [job.id for job in jobs]


class JobSearchEngineTests(SimpleTestCase):
    """Catalog filtering; every present filter must hold."""

    def test_no_filters_returns_catalog(self) -> None:
        self.assertEqual(len(JobSearchEngine.search_jobs()), 8)
        self.assertEqual(len(JobSearchEngine.search_jobs(JobSearchFilters())), 8)

    def test_query_matches_title_company_description_and_tags(self) -> None:
        results = ids(JobSearchEngine.search_jobs(JobSearchFilters(query="REACT")))
        self.assertIn("job-1", results)
        self.assertIn("job-6", results)
        self.assertEqual(ids(JobSearchEngine.search_jobs(JobSearchFilters(query="innovatelabs"))), ["job-2"])
        self.assertEqual(ids(JobSearchEngine.search_jobs(JobSearchFilters(query="kubernetes"))), ["job-7"])

    def test_location_filter(self) -> None:
        self.assertEqual(ids(JobSearchEngine.search_jobs(JobSearchFilters(location="Seattle"))), ["job-4"])
        self.assertEqual(
            ids(JobSearchEngine.search_jobs(JobSearchFilters(location="Remote"))),
            ["job-1", "job-3", "job-5", "job-7"],
        )

    def test_choice_filters(self) -> None:
        self.assertEqual(
            ids(JobSearchEngine.search_jobs(JobSearchFilters(work_model=["remote"]))),
            ["job-3", "job-5", "job-7"],
        )
        self.assertEqual(ids(JobSearchEngine.search_jobs(JobSearchFilters(experience=["junior"]))), ["job-8"])
        self.assertEqual(ids(JobSearchEngine.search_jobs(JobSearchFilters(company=["InnovateLabs"]))), ["job-2"])
        self.assertEqual(
            ids(JobSearchEngine.search_jobs(JobSearchFilters(company_size=["startup", "small"]))),
            ["job-3", "job-5"],
        )

    def test_salary_filters_overlap_the_range(self) -> None:
        self.assertEqual(
            ids(JobSearchEngine.search_jobs(JobSearchFilters(salary_min=150000))),
            ["job-1", "job-2", "job-4", "job-7"],
        )
        self.assertEqual(ids(JobSearchEngine.search_jobs(JobSearchFilters(salary_max=70000))), ["job-8"])

    def test_flags(self) -> None:
        self.assertEqual(
            ids(JobSearchEngine.search_jobs(JobSearchFilters(featured=True))),
            ["job-1", "job-3", "job-5", "job-7"],
        )
        self.assertEqual(ids(JobSearchEngine.search_jobs(JobSearchFilters(urgent=True))), ["job-2", "job-5", "job-8"])

    def test_date_posted_window(self) -> None:
        today = date(2025, 9, 8)
        self.assertEqual(
            ids(JobSearchEngine.search_jobs(JobSearchFilters(date_posted="today"), today=today)),
            ["job-1", "job-2"],
        )
        self.assertEqual(len(JobSearchEngine.search_jobs(JobSearchFilters(date_posted="week"), today=today)), 8)
        self.assertEqual(JobSearchEngine.search_jobs(JobSearchFilters(date_posted="today"), today=date(2030, 1, 1)), [])

    def test_filters_combine(self) -> None:
        filters = JobSearchFilters(category=["Technology"], work_model=["remote"])
        self.assertEqual(ids(JobSearchEngine.search_jobs(filters)), ["job-7"])

    def test_lookups_and_stats(self) -> None:
        self.assertEqual(JobSearchEngine.get_job_by_id("job-3").title, "UX/UI Designer")
        self.assertIsNone(JobSearchEngine.get_job_by_id("job-99"))
        self.assertEqual(ids(JobSearchEngine.get_recent_jobs(3)), ["job-1", "job-2", "job-3"])
        self.assertEqual(ids(JobSearchEngine.get_jobs_by_category("Technology")), ["job-1", "job-6", "job-7"])
        self.assertEqual(len(JobSearchEngine.get_featured_jobs(2)), 2)
        self.assertEqual(
            JobSearchEngine.get_job_stats(),
            {
                'total_jobs': 8,
                'featured_jobs': 4,
                'urgent_jobs': 3,
                'remote_jobs': 3,
                'companies_count': 8,
                'categories_count': 6,
            },
        )

    def test_catalog_is_not_mutated_by_callers(self) -> None:
        jobs = JobSearchEngine.all_jobs()
        jobs.clear()
        self.assertEqual(len(JobSearchEngine.all_jobs()), 8)


class JobSearchFiltersTests(SimpleTestCase):
    def test_from_query_params(self) -> None:
        params = QueryDict("query=+python+&job_type=full-time&job_type=contract&salary_min=abc&featured=true")
        filters = JobSearchFilters.from_query_params(params)
        self.assertEqual(filters.query, "python")
        self.assertEqual(filters.job_type, ["full-time", "contract"])
        self.assertIsNone(filters.salary_min)
        self.assertTrue(filters.featured)
        self.assertEqual(filters.date_posted, "all")

    def test_empty_filters(self) -> None:
        self.assertTrue(JobSearchFilters().is_empty())
        self.assertFalse(JobSearchFilters(urgent=True).is_empty())

    def test_query_params_round_trip(self) -> None:
        filters = JobSearchFilters(query="data", work_model=["remote", "hybrid"], salary_min=90000)
        rebuilt = JobSearchFilters.from_query_params(filters.to_query_params())
        self.assertEqual(rebuilt, filters)
