from django.test import SimpleTestCase

from jobs.catalog import SalaryRange
from jobs.matching import JobMatchingEngine, MatchingProfile, SalaryExpectation, round_half_up
from jobs.services import JobSearchEngine


def job(job_id):
    return JobSearchEngine.get_job_by_id(job_id)


class ComponentScoreTests(SimpleTestCase):
    def test_experience_distance(self) -> None:
        self.assertEqual(JobMatchingEngine.experience_score("senior", "senior"), 20)
        self.assertEqual(JobMatchingEngine.experience_score("senior", "lead"), 15)
        self.assertEqual(JobMatchingEngine.experience_score("senior", "junior"), 10)
        self.assertEqual(JobMatchingEngine.experience_score("executive", "entry"), 5)
        self.assertEqual(JobMatchingEngine.experience_score("senior", "wizard"), 10)

    def test_salary_overlap(self) -> None:
        senior_frontend = SalaryRange(min=120000, max=180000)
        self.assertEqual(JobMatchingEngine.salary_score(senior_frontend, SalaryExpectation(130000, 150000)), 15)
        self.assertEqual(JobMatchingEngine.salary_score(senior_frontend, SalaryExpectation(100000, 200000)), 9)
        self.assertEqual(JobMatchingEngine.salary_score(senior_frontend, SalaryExpectation(150000, 150000)), 15)

    def test_salary_below_and_above_expectation(self) -> None:
        sdr = SalaryRange(min=45000, max=65000)
        self.assertEqual(JobMatchingEngine.salary_score(sdr, SalaryExpectation(70000, 100000)), 8)
        self.assertEqual(JobMatchingEngine.salary_score(sdr, SalaryExpectation(75000, 100000)), 5)
        self.assertEqual(JobMatchingEngine.salary_score(sdr, SalaryExpectation(100000, 120000)), 2)
        self.assertEqual(JobMatchingEngine.salary_score(sdr, SalaryExpectation(20000, 40000)), 10)

    def test_salary_currency_mismatch(self) -> None:
        self.assertEqual(
            JobMatchingEngine.salary_score(SalaryRange(min=1, max=2), SalaryExpectation(1, 2, currency="EUR")),
            5,
        )

    def test_skills(self) -> None:
        self.assertEqual(
            JobMatchingEngine.skills_score(["React", "TypeScript"], ["Python required"], ["react"]),
            (8, ["Skill match: react"], ["Python required"], ["react"]),
        )
        # requirements without "required" or "must" are never reported as gaps
        score, _, missing, _ = JobMatchingEngine.skills_score([], ["Nice to have Go"], ["java"])
        self.assertEqual((score, missing), (0, []))

    def test_mbti_and_zodiac(self) -> None:
        technology = job("job-1")
        self.assertEqual(
            JobMatchingEngine.mbti_score(technology, "INTJ"),
            (10, "Excellent MBTI match: INTJ personalities thrive in Technology"),
        )
        self.assertEqual(JobMatchingEngine.mbti_score(job("job-8"), "INTJ"), (0, ""))
        self.assertEqual(JobMatchingEngine.astrological_score(technology, "virgo")[0], 2)
        self.assertEqual(JobMatchingEngine.astrological_score(technology, "aries"), (0, ""))

    def test_round_half_up(self) -> None:
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(7.5), 8)
        self.assertEqual(round_half_up(7.49), 7)


class JobMatchTests(SimpleTestCase):
    def test_empty_profile_only_gets_featured_bonus(self) -> None:
        match = JobMatchingEngine.calculate_job_match(job("job-1"), MatchingProfile())
        self.assertEqual(match.match_score, 2)
        self.assertEqual(match.match_reasons, [])

    def test_urgent_bonus_needs_mid_level_or_above(self) -> None:
        match = JobMatchingEngine.calculate_job_match(job("job-2"), MatchingProfile(experience_level="mid"))
        self.assertEqual(match.match_score, 23)
        self.assertEqual(match.match_reasons, ["Experience level match (mid)", "Urgent hiring - quick opportunity"])

        match = JobMatchingEngine.calculate_job_match(job("job-8"), MatchingProfile(experience_level="junior"))
        self.assertEqual(match.match_score, 20)

    def test_score_is_capped(self) -> None:
        profile = MatchingProfile(
            experience_level="senior",
            preferred_job_types=["full-time"],
            preferred_work_models=["hybrid"],
            preferred_locations=["San Francisco"],
            salary_expectation=SalaryExpectation(130000, 150000),
            skills=["React", "TypeScript", "Next.js", "Frontend", "JavaScript", "CSS"],
            preferred_categories=["Technology"],
            preferred_company_sizes=["medium"],
        )
        match = JobMatchingEngine.calculate_job_match(job("job-1"), profile)
        self.assertEqual(match.match_score, 100)
        self.assertIn("Location preference match", match.match_reasons)
        self.assertIn("Compensation alignment", match.strengths)

    def test_remote_preference_matches_location(self) -> None:
        profile = MatchingProfile(prefer_remote=True)
        self.assertTrue(JobMatchingEngine.is_location_match(job("job-7"), profile))
        self.assertFalse(JobMatchingEngine.is_location_match(job("job-6"), profile))

    def test_missing_skills_are_unique(self) -> None:
        profile = MatchingProfile(experience_level="entry", salary_expectation=SalaryExpectation(300000, 400000))
        match = JobMatchingEngine.calculate_job_match(job("job-1"), profile)
        self.assertEqual(
            match.missing_skills,
            ["May need senior level experience", "Salary may be below expectations"],
        )

    def test_ranking_is_stable(self) -> None:
        profile = MatchingProfile(preferred_categories=["Sales"])
        ranked = JobMatchingEngine.rank_jobs_by_match(JobSearchEngine.all_jobs(), profile)
        self.assertEqual(
            [match.job.id for match in ranked],
            ["job-8", "job-1", "job-3", "job-5", "job-7", "job-2", "job-4", "job-6"],
        )
        self.assertEqual(len(JobMatchingEngine.get_top_matches(JobSearchEngine.all_jobs(), profile, limit=3)), 3)
        self.assertEqual(
            [match.job.id for match in JobMatchingEngine.get_matching_jobs(JobSearchEngine.all_jobs(), profile, min_score=5)],
            ["job-8"],
        )
