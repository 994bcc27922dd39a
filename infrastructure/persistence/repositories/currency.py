import logging
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from domain.models.currency import CurrencyRate
from infrastructure.persistence.database import Database
from infrastructure.persistence.models.currency import CurrencyRateDB

logger = logging.getLogger(__name__)


class CurrencyRateRepository:
	"""Rate cache store on top of SQLAlchemy.

	Each call commits its own session, so a write is visible to the next
	``retrieve``. Database errors are logged here and never raised.
	"""

	def __init__(self, database: Database):
		self.database = database

	async def create(self, rate: CurrencyRate) -> bool:
		try:
			async with self.database.session() as session:
				session.add(CurrencyRateDB(code=rate.code, name=rate.name, rate=str(rate.rate)))
			return True
		except SQLAlchemyError as e:
			logger.error(f'Failed while creating currency {rate.code}: {e}')
			return False

	async def retrieve(self) -> list[CurrencyRate]:
		try:
			async with self.database.session() as session:
				result = await session.execute(select(CurrencyRateDB).order_by(CurrencyRateDB.code))
				rows = result.scalars().all()
		except SQLAlchemyError as e:
			logger.error(f'Failed while retrieving currencies: {e}')
			return []

		return [CurrencyRate(code=r.code, name=r.name, rate=Decimal(r.rate)) for r in rows]

	async def update(self, rate: CurrencyRate) -> bool:
		try:
			async with self.database.session() as session:
				row = await session.get(CurrencyRateDB, rate.code)
				if row is None:
					logger.warning(f'Cannot update currency {rate.code}: not stored')
					return False
				row.name = rate.name
				row.rate = str(rate.rate)
			return True
		except SQLAlchemyError as e:
			logger.error(f'Failed while updating currency {rate.code}: {e}')
			return False

	async def delete(self, rate: CurrencyRate) -> bool:
		try:
			async with self.database.session() as session:
				row = await session.get(CurrencyRateDB, rate.code)
				if row is None:
					logger.warning(f'Cannot delete currency {rate.code}: not stored')
					return False
				await session.delete(row)
			return True
		except SQLAlchemyError as e:
			logger.error(f'Failed while deleting currency {rate.code}: {e}')
			return False

	async def exists(self, rate: CurrencyRate) -> bool:
		try:
			async with self.database.session() as session:
				result = await session.execute(
					select(CurrencyRateDB.code).where(CurrencyRateDB.code == rate.code)
				)
				return result.scalar_one_or_none() is not None
		except SQLAlchemyError as e:
			logger.error(f'Failed while checking currency {rate.code}: {e}')
			return False
