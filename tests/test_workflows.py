import unittest

from sqlalchemy import create_engine, select
from sqlalchemy.orm import sessionmaker

from nftraffle.models import Base, Raffle, StorageEntry
from nftraffle.raffle import EmptyPoolError
from nftraffle.storage import SqlKeyValueStore
from nftraffle.workflows import (
    create_raffle,
    draw_token_ids,
    open_draw_pool,
    tokens_left,
)

PREFIX = b"beyond:ids"


class DummyRandomness:
    def __init__(self, *raw_values: int):
        self.raw_values = list(raw_values)

    def random_seed(self) -> bytes:
        return self.raw_values.pop(0).to_bytes(4, "little")


class RaffleWorkflowTestCase(unittest.TestCase):
    def setUp(self):
        self.engine = create_engine("sqlite+pysqlite:///:memory:", future=True)
        Base.metadata.create_all(self.engine)
        self.Session = sessionmaker(
            bind=self.engine, future=True, expire_on_commit=False
        )

    def tearDown(self):
        self.engine.dispose()

    def test_create_raffle_writes_no_storage(self):
        with self.Session.begin() as session:
            raffle = create_raffle(session, PREFIX, 5000)
            self.assertIsNotNone(raffle.id)
            self.assertEqual(raffle.length, 5000)
            self.assertEqual(raffle.drawn_count, 0)

        with self.Session() as session:
            self.assertEqual(session.scalars(select(StorageEntry)).all(), [])
            self.assertEqual(tokens_left(session, PREFIX), 5000)

    def test_duplicate_prefix_rejected(self):
        with self.Session.begin() as session:
            create_raffle(session, PREFIX, 10)
            with self.assertRaises(ValueError):
                create_raffle(session, PREFIX, 20)

    def test_invalid_arguments_rejected(self):
        with self.Session.begin() as session:
            with self.assertRaises(ValueError):
                create_raffle(session, b"", 10)
            with self.assertRaises(ValueError):
                create_raffle(session, PREFIX, -1)

    def test_size_beyond_bigint_rejected(self):
        with self.Session.begin() as session:
            with self.assertRaises(ValueError):
                create_raffle(session, PREFIX, 2**63)
            self.assertIsNone(Raffle.get_by_prefix(session, PREFIX))

            raffle = create_raffle(session, PREFIX, 2**63 - 1)
            self.assertEqual(raffle.length, 2**63 - 1)

    def test_draw_token_ids_persists_length_across_sessions(self):
        with self.Session.begin() as session:
            create_raffle(session, PREFIX, 3)

        with self.Session.begin() as session:
            self.assertEqual(
                draw_token_ids(session, PREFIX, randomness=DummyRandomness(2)), ["2"]
            )

        with self.Session.begin() as session:
            self.assertEqual(tokens_left(session, PREFIX), 2)
            self.assertEqual(
                draw_token_ids(session, PREFIX, randomness=DummyRandomness(0)), ["0"]
            )

        with self.Session() as session:
            raffle = Raffle.get_by_prefix(session, PREFIX)
            assert raffle is not None
            self.assertEqual(raffle.length, 1)
            self.assertEqual(raffle.drawn_count, 2)
            self.assertEqual(open_draw_pool(session, raffle).peek(0), 1)
            self.assertEqual(len(session.scalars(select(StorageEntry)).all()), 1)

    def test_draw_all_then_exhausted(self):
        with self.Session.begin() as session:
            create_raffle(session, PREFIX, 25)
            drawn = draw_token_ids(session, PREFIX, num=25)
            self.assertEqual(sorted(drawn, key=int), [str(i) for i in range(25)])
            self.assertEqual(tokens_left(session, PREFIX), 0)
            self.assertEqual(SqlKeyValueStore(session).count_with_prefix(PREFIX), 0)
            with self.assertRaises(EmptyPoolError):
                draw_token_ids(session, PREFIX)

    def test_overdraw_leaves_raffle_untouched(self):
        with self.Session.begin() as session:
            create_raffle(session, PREFIX, 2)
            with self.assertRaises(EmptyPoolError):
                draw_token_ids(session, PREFIX, num=3)
            self.assertEqual(tokens_left(session, PREFIX), 2)
            self.assertEqual(session.scalars(select(StorageEntry)).all(), [])

    def test_unknown_prefix(self):
        with self.Session() as session:
            with self.assertRaises(LookupError):
                draw_token_ids(session, b"missing")
            with self.assertRaises(LookupError):
                tokens_left(session, b"missing")

    def test_raffles_share_storage_table(self):
        with self.Session.begin() as session:
            create_raffle(session, b"a:", 10)
            create_raffle(session, b"b:", 10)
            draw_token_ids(session, b"a:", num=3, randomness=DummyRandomness(0, 0, 0))
            self.assertEqual(tokens_left(session, b"a:"), 7)
            self.assertEqual(tokens_left(session, b"b:"), 10)
            b_raffle = Raffle.get_by_prefix(session, b"b:")
            assert b_raffle is not None
            b_pool = open_draw_pool(session, b_raffle)
            self.assertEqual([b_pool.peek(i) for i in range(10)], list(range(10)))


if __name__ == "__main__":
    unittest.main()
