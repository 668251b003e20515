"""Seed operator skills and SLA targets from CSV files.

Usage:
    python -m helpdesk.tools.seed_db                 # reads CSV_DATA_PATH
    python -m helpdesk.tools.seed_db --data-dir data
    python -m helpdesk.tools.seed_db --drop  # drop existing skills / targets first
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from helpdesk.adapters.csv_loader.loader import load_operator_skills, load_sla_targets
from helpdesk.adapters.persistence.database import async_session_factory
from helpdesk.adapters.persistence.models import OperatorSkillModel, SlaConfigModel
from helpdesk.adapters.persistence.repositories import SqlSkillRepository, SqlSlaTargetRepository
from helpdesk.config import settings

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)

SKILLS_CSV = "operator_skills.csv"
SLA_CSV = "sla_targets.csv"


async def _drop_data(session: AsyncSession) -> None:
    """Delete seeded configuration; tickets are left untouched."""
    for model in [OperatorSkillModel, SlaConfigModel]:
        await session.execute(delete(model))
    await session.commit()
    logger.info("Dropped operator skills and SLA targets")


async def seed(data_dir: Path, drop: bool = False) -> dict[str, int]:
    """Main seed function. Returns counts of upserted records."""
    counts = {"operator_skills": 0, "sla_targets": 0}

    skills_csv = data_dir / SKILLS_CSV
    sla_csv = data_dir / SLA_CSV
    if not skills_csv.exists() and not sla_csv.exists():
        raise FileNotFoundError(
            f"Neither {SKILLS_CSV} nor {SLA_CSV} found in {data_dir}"
        )

    async with async_session_factory() as session:
        if drop:
            await _drop_data(session)

        if sla_csv.exists():
            sla_repo = SqlSlaTargetRepository(session)
            for target in load_sla_targets(sla_csv):
                await sla_repo.upsert(target)
                counts["sla_targets"] += 1
        else:
            logger.warning("%s not found, SLA targets not seeded", sla_csv)

        if skills_csv.exists():
            skill_repo = SqlSkillRepository(session)
            for record in load_operator_skills(skills_csv):
                await skill_repo.upsert(record)
                counts["operator_skills"] += 1
        else:
            logger.warning("%s not found, operator skills not seeded", skills_csv)

        await session.commit()

    logger.info("Seed complete: %s", counts)
    return counts


async def _verify_data() -> None:
    """Print a summary of what is configured now."""
    async with async_session_factory() as session:
        targets = (await session.execute(select(SlaConfigModel))).scalars().all()
        per_skill = (
            await session.execute(
                select(OperatorSkillModel.skill, func.count(OperatorSkillModel.id))
                .group_by(OperatorSkillModel.skill)
                .order_by(OperatorSkillModel.skill)
            )
        ).all()
        operators = (
            await session.execute(select(func.count(func.distinct(OperatorSkillModel.user_id))))
        ).scalar() or 0

    print(f"\n{'='*50}")
    print("SEED VERIFICATION")
    print(f"{'='*50}")
    print(f"Operators with skills: {operators}")
    print(f"Skill holders per category: {dict(per_skill)}")
    for t in sorted(targets, key=lambda t: t.priority):
        print(f"SLA {t.priority}: response {t.response_hours}h, resolution {t.resolution_hours}h")
    print(f"{'='*50}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seed helpdesk configuration from CSV files")
    parser.add_argument(
        "--data-dir", type=str, default=settings.csv_data_path,
        help=f"Directory containing CSV files (default: CSV_DATA_PATH, now {settings.csv_data_path})",
    )
    parser.add_argument(
        "--drop", action="store_true",
        help="Drop existing skills and SLA targets before seeding",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only run verification, don't seed",
    )
    return parser


def main():
    args = build_parser().parse_args()

    data_dir = Path(args.data_dir)
    if not args.verify_only and not data_dir.exists():
        logger.error("Data directory not found: %s", data_dir)
        sys.exit(1)

    if args.verify_only:
        asyncio.run(_verify_data())
    else:
        async def run_all():
            await seed(data_dir, drop=args.drop)
            await _verify_data()
        asyncio.run(run_all())


if __name__ == "__main__":
    main()
