"""Run a simulated ballot with fake participants and print the outcome.

Generates participant names with faker using a fixed seed, registers them,
lets a few of them submit proposals, casts random votes for a share of them,
then closes the session and prints the final snapshot and event log as JSON.

Usage:
    python scripts/simulate_ballot.py
    python scripts/simulate_ballot.py --voters 40 --proposals 4 --turnout 0.6
    python scripts/simulate_ballot.py --voting-quorum 50 --tie-policy all --gating advisory
"""

import argparse
import json
import logging
import os
import random
import sys
from pathlib import Path

from faker import Faker

sys.path.insert(0, str(Path(__file__).parent.parent))

from ballot import Ballot, BallotConfig, BallotError, ConfigError  # noqa: E402

ADMIN = "administrator"
SEED = 20260201

logger = logging.getLogger("simulate_ballot")


def generate_participants(count: int, seed: int) -> list[str]:
    """Generate ``count`` distinct fake participant names."""
    fake = Faker(["en_US", "en_GB", "de_DE", "fr_FR"])
    Faker.seed(seed)
    names: list[str] = []
    seen: set[str] = set()
    while len(names) < count:
        name = fake.name()
        if name.lower() in seen:
            continue
        seen.add(name.lower())
        names.append(name)
    return names


def generate_proposals(count: int, seed: int) -> list[str]:
    fake = Faker("en_US")
    Faker.seed(seed + 1)
    return [fake.sentence(nb_words=6).rstrip(".") for _ in range(count)]


def run_simulation(
    voters: int,
    proposals: int,
    turnout: float,
    voting_quorum: int,
    winning_quorum: int,
    config: BallotConfig,
    seed: int = SEED,
) -> Ballot:
    """Drive one ballot through every phase and return it."""
    rng = random.Random(seed)
    participants = generate_participants(voters, seed)

    ballot = Ballot(ADMIN, config)
    for name in participants:
        ballot.register_voter(ADMIN, name)

    ballot.start_proposal_registration(ADMIN)
    for description in generate_proposals(proposals, seed):
        ballot.register_proposal(rng.choice(participants), description)
    ballot.end_proposal_registration(ADMIN)

    ballot.set_voting_quorum(ADMIN, voting_quorum)
    ballot.set_winning_quorum(ADMIN, winning_quorum)

    ballot.start_voting_session(ADMIN)
    num_proposals = len(ballot.proposals())
    for name in participants:
        if rng.random() < turnout:
            ballot.cast_vote(name, rng.randrange(num_proposals))
    ballot.end_voting_session(ADMIN)

    return ballot


def main():
    parser = argparse.ArgumentParser(description="Simulate a ballot with fake participants")
    parser.add_argument("--voters", type=int, default=12, help="Number of participants")
    parser.add_argument("--proposals", type=int, default=3, help="Number of proposals")
    parser.add_argument("--turnout", type=float, default=0.8, help="Probability a participant votes")
    parser.add_argument("--voting-quorum", type=int, default=0, help="Required turnout percentage")
    parser.add_argument("--winning-quorum", type=int, default=0, help="Required support percentage")
    parser.add_argument("--tie-policy", default=None, help="'first' or 'all' (default from env)")
    parser.add_argument("--gating", default=None, help="'gated' or 'advisory' (default from env)")
    parser.add_argument("--seed", type=int, default=SEED, help="Random seed")
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    try:
        config = BallotConfig.from_env()
        config = BallotConfig(
            tie_policy=args.tie_policy or config.tie_policy,
            quorum_gating=args.gating or config.quorum_gating,
            min_proposals=config.min_proposals,
        )
    except ConfigError as e:
        parser.error(str(e))

    try:
        ballot = run_simulation(
            voters=args.voters,
            proposals=args.proposals,
            turnout=args.turnout,
            voting_quorum=args.voting_quorum,
            winning_quorum=args.winning_quorum,
            config=config,
            seed=args.seed,
        )
    except BallotError as e:
        logger.error("Simulation stopped: %s", e)
        sys.exit(1)

    print(json.dumps({
        "winner": ballot.get_winner(),
        "snapshot": ballot.snapshot(),
        "events": ballot.events.to_list(),
    }, indent=2))


if __name__ == "__main__":
    main()
