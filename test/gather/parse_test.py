import unittest

from hypothesis import given
from hypothesis.strategies import composite, integers, lists, sampled_from, text

from slurm_inspector.gather.parse import fixed_arity_lines, sinfo_format, squeue_format
from slurm_inspector.interpret.states import (
    ErrorCause,
    JobState,
    NodeState,
    PartitionAvailability,
    StateReason,
)
from slurm_inspector.records import JobInfo, PartitionNodeInfo

SQUEUE_LINE = "agassiz 1 2 1 N/A * 82 * small_test * N/A 2:46 agassiz 0.99998474074527 None 2015-11-12T09:51:32 RUNNING willi 1000"


@composite
def tokens(draw):
    return draw(text("abcXYZ019.:/*-_", min_size=1, max_size=8))


@composite
def whitespace(draw):
    return draw(text(" \t", min_size=1, max_size=3))


@composite
def token_lines(draw, arity):
    items = draw(lists(tokens(), min_size=arity, max_size=arity))
    sep = draw(whitespace())
    return sep.join(items)


class TestFixedArityLines(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(list(fixed_arity_lines("", 3)), [])
        self.assertEqual(list(fixed_arity_lines("\n\n   \n", 3)), [])

    def test_runs_of_whitespace(self):
        self.assertEqual(list(fixed_arity_lines("  a \t b   c  ", 3)), [["a", "b", "c"]])

    def test_lines_break_only_at_newline(self):
        out = list(fixed_arity_lines("a b\x0cc\r\nd e f\r\n", 3))
        self.assertEqual(out, [["a", "b", "c"], ["d", "e", "f"]])
        self.assertEqual(list(fixed_arity_lines("a\u2028b c", 3)), [["a", "b", "c"]])

    @given(integers(1, 25), integers(0, 30))
    def test_wrong_arity_is_skipped(self, arity, count):
        line = " ".join(["x"] * count)
        out = list(fixed_arity_lines(line, arity))
        if count == arity:
            self.assertEqual(out, [["x"] * arity])
        else:
            self.assertEqual(out, [])

    @given(lists(token_lines(3)), lists(token_lines(4)))
    def test_only_matching_lines_survive(self, good, bad):
        text_ = "\n".join(good + bad)
        out = list(fixed_arity_lines(text_, 3))
        self.assertEqual(out, [line.split() for line in good])


class TestSinfoFormat(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(sinfo_format(""), [])

    def test_invalid(self):
        self.assertEqual(sinfo_format("1 2 3"), [])

    def test_form_feed_is_not_a_line_break(self):
        out = sinfo_format("longrun up node01 node01 none 0.22\x0cidle 2 2 2")
        self.assertEqual(len(out), 1)
        self.assertEqual(out[0].node_state, NodeState.IDLE)

    def test_one_line(self):
        s = "longrun up node01.foo.bar node01 none 0.22 idle 2 2 2"
        expected = [
            PartitionNodeInfo(
                partition="longrun",
                availability=PartitionAvailability.UP,
                hostname="node01.foo.bar",
                node="node01",
                error=ErrorCause.NONE,
                cpu_load=0.22,
                node_state=NodeState.IDLE,
                node_sockets=2,
                node_cores=2,
                node_threads=2,
            )
        ]
        self.assertEqual(sinfo_format(s), expected)

    def test_two_lines(self):
        s = "longrun up node01.foo.bar node01 none 0.22 idle 2 2 2\nlongrun up node02.foo.bar node02 down 0.1 idle 1 2 4"
        out = sinfo_format(s)
        self.assertEqual(len(out), 2)
        self.assertEqual(out[1].hostname, "node02.foo.bar")
        self.assertEqual(out[1].error, ErrorCause.DOWN)
        self.assertEqual(out[1].cpu_load, 0.1)
        self.assertEqual(
            (out[1].node_sockets, out[1].node_cores, out[1].node_threads), (1, 2, 4)
        )

    def test_placeholders_are_absent(self):
        out = sinfo_format("esd down node03 node03 down - - - - -")
        self.assertEqual(len(out), 1)
        node = out[0]
        self.assertEqual(node.availability, PartitionAvailability.DOWN)
        self.assertFalse(node.is_up)
        self.assertIsNone(node.cpu_load)
        self.assertEqual(node.node_state, NodeState.UNKNOWN)
        self.assertIsNone(node.node_sockets)
        self.assertIsNone(node.node_cores)
        self.assertIsNone(node.node_threads)

    def test_malformed_lines_are_skipped(self):
        s = "\n".join(
            [
                "longrun up node01 node01 none 0.22 idle 2 2 2",
                "longrun up node02 node02 none 0.22 idle 2 2",
                "longrun up node03 node03 none 0.22 idle 2 2 2 extra",
                "garbage",
                "longrun up node04 node04 none 0.22 idle 2 2 2",
            ]
        )
        out = sinfo_format(s)
        self.assertEqual([n.node for n in out], ["node01", "node04"])

    @given(lists(token_lines(PartitionNodeInfo.ARITY), max_size=5))
    def test_one_record_per_line(self, lines):
        out = sinfo_format("\n".join(lines))
        self.assertEqual(len(out), len(lines))
        for record, line in zip(out, lines):
            t = line.split()
            self.assertEqual(record.partition, t[0])
            self.assertEqual(record.hostname, t[2])
            self.assertEqual(record.node, t[3])


class TestSqueueFormat(unittest.TestCase):
    def test_empty(self):
        self.assertEqual(squeue_format(""), [])

    def test_invalid(self):
        self.assertEqual(squeue_format("1 2 3 4"), [])

    def test_one_line(self):
        expected = [
            JobInfo(
                executing_host="agassiz",
                minimum_cpu=1,
                num_cpu=2,
                num_nodes=1,
                job_array_id=None,
                num_sockets=None,
                job_id=82,
                num_cores=None,
                job_name="small_test",
                num_threads=None,
                job_array_index=None,
                run_time="2:46",
                list_of_nodes=("agassiz",),
                priority=0.99998474074527,
                state_reason=StateReason.NONE,
                start_time="2015-11-12T09:51:32",
                job_state=JobState.RUNNING,
                user_name="willi",
                user_id=1000,
            )
        ]
        self.assertEqual(squeue_format(SQUEUE_LINE), expected)

    def test_leading_job_id_is_rejected(self):
        self.assertEqual(squeue_format("82 " + SQUEUE_LINE), [])

    def test_list_of_nodes(self):
        line = SQUEUE_LINE.replace(" agassiz 0.99", " node03,node04,node05 0.99")
        out = squeue_format(line)
        self.assertEqual(out[0].list_of_nodes, ("node03", "node04", "node05"))

    @given(
        sampled_from(["pending", "PENDING", "Pending"]),
        sampled_from(["Resources", "resources", "RESOURCES"]),
    )
    def test_enums_any_case(self, state, reason):
        line = SQUEUE_LINE.replace("RUNNING", state).replace("None", reason)
        out = squeue_format(line)
        self.assertEqual(out[0].job_state, JobState.PENDING)
        self.assertEqual(out[0].state_reason, StateReason.RESOURCES)

    def test_same_input_same_records(self):
        s = "\n".join([SQUEUE_LINE] * 3)
        self.assertEqual(squeue_format(s), squeue_format(s))
