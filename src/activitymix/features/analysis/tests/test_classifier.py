import unittest
from activitymix.features.analysis.classifier import ActivityClassifier
from activitymix.features.analysis.models import Label
from activitymix.features.analysis.taxonomy import Category


def labels(*titles):
    return [Label(text=title, row_number=index + 2) for index, title in enumerate(titles)]


class TestFindMatch(unittest.TestCase):

    def setUp(self):
        self.classifier = ActivityClassifier()

    def test_exact_match_is_case_insensitive(self):
        self.assertEqual(self.classifier.find_match("poll"), (Category.PRACTICE, "Poll", True))
        self.assertEqual(self.classifier.find_match("WHITEBOARD"), (Category.PRODUCE, "Whiteboard", True))

    def test_exact_match_beats_earlier_substring(self):
        # "Quiz" in Practice is seen before the exact entry in Produce
        self.assertEqual(self.classifier.find_match("Summative quiz"), (Category.PRODUCE, "Summative quiz", True))

    def test_longest_substring_wins(self):
        category, activity, exact = self.classifier.find_match("Weekly interactive video session")
        self.assertEqual((category, activity, exact), (Category.PRESENT, "Interactive video", False))

        _, activity, _ = self.classifier.find_match("Multi quick answer check (unit 2)")
        self.assertEqual(activity, "Multi quick answer check")

    def test_equal_length_tie_goes_to_first_declared(self):
        # Video (Present) and Forum (Participate) are both five characters
        self.assertEqual(self.classifier.find_match("Forum Video"), (Category.PRESENT, "Video", False))

    def test_tie_follows_taxonomy_order(self):
        classifier = ActivityClassifier(taxonomy={
            Category.PARTICIPATE: ("Poller",),
            Category.PRESENT: ("Reveal",),
        })
        category, activity, _ = classifier.find_match("Reveal then Poller")
        self.assertEqual((category, activity), (Category.PARTICIPATE, "Poller"))

    def test_no_match(self):
        self.assertIsNone(self.classifier.find_match("Campus tour"))


class TestClassify(unittest.TestCase):

    def setUp(self):
        self.classifier = ActivityClassifier()

    def test_shared_activity_counts_twice(self):
        outcome = self.classifier.classify(labels("Whiteboard"))
        self.assertEqual(outcome.category_counts[Category.PRODUCE], 1)
        self.assertEqual(outcome.category_counts[Category.PARTICIPATE], 1)
        self.assertEqual(outcome.categorized_activities[Category.PRODUCE], {"Whiteboard": 1})
        self.assertEqual(outcome.categorized_activities[Category.PARTICIPATE], {"Whiteboard": 1})
        self.assertEqual(outcome.activity_counts, {"Whiteboard": 1})
        self.assertTrue(outcome.decisions[0].shared)
        self.assertEqual(outcome.classified_count, 1)

    def test_poll_is_practice_and_participate(self):
        outcome = self.classifier.classify(labels("Poll"))
        self.assertEqual(outcome.decisions[0].category, Category.PRACTICE)
        self.assertEqual(outcome.decisions[0].rule, "exact")
        self.assertEqual(outcome.category_counts[Category.PRACTICE], 1)
        self.assertEqual(outcome.category_counts[Category.PARTICIPATE], 1)

    def test_learning_outcomes_ignored(self):
        outcome = self.classifier.classify(labels("Learning OUTCOMES for week 1"))
        self.assertEqual(sum(outcome.category_counts.values()), 0)
        self.assertEqual(outcome.activity_counts, {})
        self.assertEqual(outcome.classified_count, 0)
        ignored_lines = [line for line in outcome.audit_log.splitlines() if "ignored" in line]
        self.assertEqual(ignored_lines, ['Row 2: "Learning OUTCOMES for week 1" ignored (Learning outcomes)'])

    def test_coursework_rule_uses_literal_title(self):
        classifier = ActivityClassifier(taxonomy={Category.PRESENT: ("Video",)})
        outcome = classifier.classify(labels("Final coursework essay"))
        self.assertEqual(outcome.category_counts[Category.PRODUCE], 1)
        self.assertEqual(outcome.activity_counts, {"Final coursework essay": 1})
        self.assertEqual(outcome.categorized_activities[Category.PRODUCE], {"Final coursework essay": 1})
        self.assertIn("(Custom Rule - Coursework)", outcome.audit_log)

    def test_simulation_rule(self):
        classifier = ActivityClassifier(taxonomy={Category.PRESENT: ("Video",)})
        outcome = classifier.classify(labels("Lab simulation"))
        self.assertEqual(outcome.categorized_activities[Category.PRACTICE], {"Lab simulation": 1})
        self.assertEqual(outcome.decisions[0].rule, "custom")

    def test_coursework_in_default_taxonomy_is_canonical(self):
        outcome = self.classifier.classify(labels("Coursework submission"))
        self.assertEqual(outcome.categorized_activities[Category.PRODUCE], {"Coursework": 1})

    def test_unmatched_title_is_other(self):
        outcome = self.classifier.classify(labels("Campus tour", "Campus tour"))
        self.assertEqual(outcome.category_counts[Category.OTHER], 2)
        self.assertEqual(outcome.categorized_activities[Category.OTHER], {"Campus tour": 2})
        self.assertEqual(outcome.decisions[0].rule, "fallback")

    def test_every_label_gets_one_primary_category(self):
        outcome = self.classifier.classify(labels("Video", "Quiz", "Journal", "Forum", "Campus tour"))
        primary = [decision.category for decision in outcome.decisions]
        self.assertEqual(primary, [
            Category.PRESENT, Category.PRACTICE, Category.PRODUCE, Category.PARTICIPATE, Category.OTHER,
        ])
        self.assertEqual(sum(outcome.category_counts.values()), 5)

    def test_audit_log_lines(self):
        batch = [
            Label(text="Video", row_number=2),
            Label(text="Learning outcomes", row_number=4),
            Label(text="Campus tour", row_number=5),
        ]
        outcome = self.classifier.classify(batch)
        self.assertEqual(outcome.audit_log, (
            'Row 2: "Video" categorized as Present (Video)\n'
            'Row 4: "Learning outcomes" ignored (Learning outcomes)\n'
            'Row 5: "Campus tour" categorized as Other\n'
            '\n'
            'Before pie chart calculation:\n'
            'Produce count: 0\n'
            'Participate count: 0\n'
        ))


if __name__ == '__main__':
    unittest.main()
