from sqlalchemy import select
from sqlalchemy.orm import sessionmaker
from nftraffle.db.engine import make_engine
from nftraffle.models import Base, Raffle
from nftraffle.workflows import create_raffle, draw_token_ids


def main() -> None:
    """Reset the development database and seed it with sample raffles."""
    engine = make_engine()

    Base.metadata.drop_all(engine)
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine)

    with Session.begin() as session:
        # An untouched raffle: no storage entries at all.
        create_raffle(session, b"raffle:genesis:", 10_000)

        # A raffle with a few draws so the storage table has rows to inspect.
        create_raffle(session, b"raffle:dev:", 100)
        drawn = draw_token_ids(session, b"raffle:dev:", num=5)

    with Session() as session:
        for raffle in session.scalars(select(Raffle).order_by(Raffle.id)):
            print(f"{raffle.prefix!r}: {raffle.length}/{raffle.size} left")
    print(f"Drew token ids {', '.join(drawn)} from the dev raffle.")
    print("Development database seeded.")


if __name__ == "__main__":
    main()
