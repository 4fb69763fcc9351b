"""Tests for learner pseudonymization."""

import random
import threading

from mcp_servers.servers.canvas.anonymizer import DataAnonymizer


class TestTransformUser:
    """Tests for single user records."""

    def test_same_id_same_pseudonym(self):
        anonymizer = DataAnonymizer()
        first = anonymizer.transform_user({"id": 55, "name": "Ada Lovelace"})
        again = anonymizer.transform_user({"id": 55, "name": "A. Lovelace"})

        assert first["name"] == "Student 1"
        assert again["name"] == "Student 1"

    def test_pseudonyms_follow_first_seen_order(self):
        anonymizer = DataAnonymizer()
        names = [anonymizer.transform_user({"id": i, "name": "x"})["name"] for i in (30, 10, 20, 10)]

        assert names == ["Student 1", "Student 2", "Student 3", "Student 2"]

    def test_int_and_string_ids_are_one_identity(self):
        anonymizer = DataAnonymizer()
        assert anonymizer.pseudonym_for(7) == anonymizer.pseudonym_for("7")

    def test_name_fields_replaced(self):
        anonymizer = DataAnonymizer()
        user = {
            "id": 55,
            "name": "Ada Lovelace",
            "display_name": "Ada",
            "sortable_name": "Lovelace, Ada",
            "short_name": "Ada",
            "sis_user_id": "S-55",
        }
        result = anonymizer.transform_user(user)

        assert result["name"] == "Student 1"
        assert result["display_name"] == "Student 1"
        assert result["sortable_name"] == "Student 1"
        assert result["short_name"] == "Student 1"
        assert result["sis_user_id"] == "S-55"
        assert result["id"] == 55

    def test_optional_name_fields_not_added(self):
        result = DataAnonymizer().transform_user({"id": 1, "name": "Ada"})
        assert "sortable_name" not in result
        assert "short_name" not in result

    def test_email_replaced_only_when_present(self):
        anonymizer = DataAnonymizer()

        with_email = anonymizer.transform_user({"id": 55, "name": "Ada", "email": "ada@uni.edu"})
        without_email = anonymizer.transform_user({"id": 56, "name": "Bob"})

        assert with_email["email"] == "student55@example.com"
        assert "email" not in without_email

    def test_login_id_replaced_only_when_present(self):
        anonymizer = DataAnonymizer()

        with_login = anonymizer.transform_user(
            {"id": 55, "name": "Ada", "login_id": "ada.lovelace@uni.edu"}
        )
        without_login = anonymizer.transform_user({"id": 56, "name": "Bob"})

        assert with_login["login_id"] == "student55@example.com"
        assert "login_id" not in without_login

    def test_input_not_mutated(self):
        user = {"id": 55, "name": "Ada Lovelace", "email": "ada@uni.edu"}
        DataAnonymizer().transform_user(user)

        assert user == {"id": 55, "name": "Ada Lovelace", "email": "ada@uni.edu"}

    def test_record_without_id_passes_through_as_copy(self):
        anonymizer = DataAnonymizer()
        user = {"name": "Ada Lovelace"}
        result = anonymizer.transform_user(user)

        assert result == user
        assert result is not user
        # No pseudonym was consumed
        assert anonymizer.pseudonym_for(1) == "Student 1"

    def test_non_dict_passes_through(self):
        assert DataAnonymizer().transform_user(None) is None

    def test_reset_restarts_numbering(self):
        anonymizer = DataAnonymizer()
        anonymizer.transform_user({"id": 1, "name": "x"})
        anonymizer.transform_user({"id": 2, "name": "y"})
        anonymizer.reset()

        assert anonymizer.transform_user({"id": 2, "name": "y"})["name"] == "Student 1"


class TestTransformSubmission:
    """Tests for submissions and their comments."""

    def submission(self):
        return {
            "id": 900,
            "user": {"id": 55, "name": "Ada Lovelace"},
            "submission_comments": [
                {
                    "comment": "Can I resubmit?",
                    "author_name": "Ada Lovelace",
                    "author": {"id": 55, "display_name": "Ada Lovelace", "role": "student"},
                },
                {
                    "comment": "Yes, until Friday.",
                    "author_name": "Prof. Turing",
                    "author": {"id": 9, "display_name": "Prof. Turing", "role": "teacher"},
                },
            ],
        }

    def test_learner_and_learner_comments_anonymized(self):
        result = DataAnonymizer().transform_submission(self.submission())

        assert result["user"]["name"] == "Student 1"
        learner_comment, teacher_comment = result["submission_comments"]
        assert learner_comment["author"]["display_name"] == "Student 1"
        assert learner_comment["author_name"] == "Student 1"
        assert learner_comment["comment"] == "Can I resubmit?"

    def test_teacher_comment_untouched(self):
        submission = self.submission()
        result = DataAnonymizer().transform_submission(submission)

        assert result["submission_comments"][1] == submission["submission_comments"][1]

    def test_comment_without_role_untouched(self):
        submission = {"submission_comments": [{"author_name": "Ada", "author": {"id": 55}}]}
        result = DataAnonymizer().transform_submission(submission)

        assert result["submission_comments"][0]["author_name"] == "Ada"

    def test_submission_without_user(self):
        result = DataAnonymizer().transform_submission({"id": 1, "score": 4})
        assert result == {"id": 1, "score": 4}

    def test_assignment_embeds_submission(self):
        assignment = {"id": 3, "name": "Essay", "submission": self.submission()}
        result = DataAnonymizer().transform_assignment(assignment)

        assert result["name"] == "Essay"
        assert result["submission"]["user"]["name"] == "Student 1"


class TestCollections:
    """Tests for the list variants."""

    def test_maps_over_lists(self):
        anonymizer = DataAnonymizer()
        result = anonymizer.transform_users([{"id": 1, "name": "a"}, {"id": 2, "name": "b"}])

        assert [u["name"] for u in result] == ["Student 1", "Student 2"]

    def test_non_list_returned_unchanged(self):
        anonymizer = DataAnonymizer()
        payload = {"id": 1, "name": "a"}

        assert anonymizer.transform_users(payload) is payload
        assert anonymizer.transform_submissions(None) is None
        assert anonymizer.transform_assignments("oops") == "oops"


class TestConcurrency:
    """Concurrent first sightings still yield one pseudonym per identity."""

    def test_parallel_assignment_is_consistent(self):
        anonymizer = DataAnonymizer()
        ids = list(range(200))
        seen = []
        seen_lock = threading.Lock()

        def worker(seed):
            order = ids[:]
            random.Random(seed).shuffle(order)
            mapping = {i: anonymizer.pseudonym_for(i) for i in order}
            with seen_lock:
                seen.append(mapping)

        threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(mapping == seen[0] for mapping in seen)
        assert set(seen[0].values()) == {f"Student {n}" for n in range(1, 201)}
