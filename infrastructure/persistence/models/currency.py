from sqlalchemy import String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
	pass


class CurrencyRateDB(Base):
	__tablename__ = 'currency_rates'

	code: Mapped[str] = mapped_column(String(10), primary_key=True)
	name: Mapped[str] = mapped_column(String(100), nullable=False)
	# Decimal text as received; SQLite has no exact numeric type
	rate: Mapped[str] = mapped_column(String(64), nullable=False)
