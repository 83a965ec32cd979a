from unittest import TestCase
from unittest import mock
from nftledger.events import Transfer, Approval, ApprovalForAll, ListSink, LogSink, MultiSink, PendingEvents


class TestEvents(TestCase):
    def test_to_dict_names_the_event(self):
        self.assertEqual(Transfer(None, 'stu', 1).to_dict(),
                         {'event': 'Transfer', 'sender': None, 'to': 'stu', 'token_id': 1})
        self.assertEqual(Approval('stu', 'raghu', 1).to_dict()['event'], 'Approval')
        self.assertEqual(ApprovalForAll('stu', 'raghu', True).to_dict(),
                         {'event': 'ApprovalForAll', 'owner': 'stu', 'operator': 'raghu', 'approved': True})

    def test_events_compare_by_value(self):
        self.assertEqual(Transfer('a', 'b', 1), Transfer('a', 'b', 1))
        self.assertNotEqual(Transfer('a', 'b', 1).to_dict(), Approval('a', 'b', 1).to_dict())


class TestSinks(TestCase):
    def test_list_sink_records_in_order(self):
        s = ListSink()
        s.emit(Transfer(None, 'a', 1))
        s.emit(Transfer('a', 'b', 1))

        self.assertEqual(s.events, [Transfer(None, 'a', 1), Transfer('a', 'b', 1)])

        s.clear()
        self.assertEqual(s.events, [])

    def test_log_sink_logs_dict(self):
        log = mock.Mock()
        LogSink(log=log).emit(Transfer(None, 'a', 1))

        log.info.assert_called_once_with(Transfer(None, 'a', 1).to_dict())

    def test_multi_sink_fans_out(self):
        a, b = ListSink(), ListSink()
        MultiSink(a, b).emit(Approval('a', 'b', 1))

        self.assertEqual(a.events, b.events)
        self.assertEqual(len(a.events), 1)

    def test_pending_events_take(self):
        p = PendingEvents()

        p.emit(Transfer(None, 'a', 1))
        taken = p.take()

        self.assertEqual(taken, [Transfer(None, 'a', 1)])
        self.assertEqual(p.pending, [])
        self.assertEqual(p.take(), [])

    def test_pending_events_clear(self):
        p = PendingEvents()
        p.emit(Transfer(None, 'a', 1))
        p.clear()

        self.assertEqual(p.take(), [])
