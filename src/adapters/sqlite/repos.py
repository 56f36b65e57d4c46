import sqlite3
from datetime import UTC, datetime
from typing import Any

from src.domain.entities import Expense, SaleDetails, Vehicle, VehicleBase, parse_vehicle

_VEHICLE_COLUMNS = ("status", *VehicleBase.model_fields)
_SALE_COLUMNS = tuple(SaleDetails.model_fields)


# Helper to convert sqlite rows to dicts
def dict_factory(cursor: sqlite3.Cursor, row: Any) -> dict[str, Any]:
    d = {}
    for idx, col in enumerate(cursor.description):
        d[col[0]] = row[idx]
    return d


def _utc_now() -> str:
    return datetime.now(UTC).isoformat()


def _row_to_vehicle(row: dict[str, Any]) -> Vehicle:
    data = {col: row[col] for col in _VEHICLE_COLUMNS}
    data["is_partnership"] = bool(data["is_partnership"])
    if data["status"] == "Sold":
        data["sale"] = {col: row[col] for col in _SALE_COLUMNS}
    return parse_vehicle(data)


class _SQLiteRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = dict_factory
        return conn

    def _write(self, sql: str, params: tuple[Any, ...]) -> None:
        conn = self._get_conn()
        try:
            conn.execute(sql, params)
            conn.commit()
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()


class SQLiteVehicleRepo(_SQLiteRepo):
    """Vehicles table. Sale columns are NULL unless the vehicle is Sold."""

    def save(self, vehicle: Vehicle) -> Vehicle:
        columns = (*_VEHICLE_COLUMNS, *_SALE_COLUMNS)
        sale = vehicle.sale_facts
        values = [getattr(vehicle, col) for col in _VEHICLE_COLUMNS]
        values += [getattr(sale, col) if sale is not None else None for col in _SALE_COLUMNS]

        updates = ",\n                    ".join(
            f"{col}=excluded.{col}" for col in columns if col != "id"
        )
        self._write(
            f"""
                INSERT INTO vehicles ({", ".join(columns)}, created_at)
                VALUES ({", ".join("?" for _ in columns)}, ?)
                ON CONFLICT(id) DO UPDATE SET
                    {updates}
            """,
            (*values, _utc_now()),
        )
        return vehicle

    def get(self, vehicle_id: str) -> Vehicle | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM vehicles WHERE id = ?", (vehicle_id,)).fetchone()
            return _row_to_vehicle(row) if row else None
        finally:
            conn.close()

    def list_vehicles(self) -> list[Vehicle]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT * FROM vehicles ORDER BY created_at DESC, rowid DESC"
            ).fetchall()
            return [_row_to_vehicle(row) for row in rows]
        finally:
            conn.close()

    def delete(self, vehicle_id: str) -> None:
        self._write("DELETE FROM vehicles WHERE id = ?", (vehicle_id,))


class SQLiteExpenseRepo(_SQLiteRepo):
    def save(self, expense: Expense) -> Expense:
        self._write(
            """
                INSERT INTO expenses (id, vehicle_id, amount, date, description, created_at)
                VALUES (?, ?, ?, ?, ?, ?)
                ON CONFLICT(id) DO UPDATE SET
                    vehicle_id=excluded.vehicle_id,
                    amount=excluded.amount,
                    date=excluded.date,
                    description=excluded.description
            """,
            (
                expense.id,
                expense.vehicle_id,
                expense.amount,
                expense.date,
                expense.description,
                _utc_now(),
            ),
        )
        return expense

    def get(self, expense_id: str) -> Expense | None:
        conn = self._get_conn()
        try:
            row = conn.execute("SELECT * FROM expenses WHERE id = ?", (expense_id,)).fetchone()
            if not row:
                return None
            return Expense(
                id=row["id"],
                vehicle_id=row["vehicle_id"],
                amount=row["amount"],
                date=row["date"],
                description=row["description"],
            )
        finally:
            conn.close()

    def list_expenses(self) -> list[Expense]:
        conn = self._get_conn()
        try:
            rows = conn.execute(
                "SELECT id, vehicle_id, amount, date, description FROM expenses "
                "ORDER BY date DESC, created_at DESC"
            ).fetchall()
            return [Expense(**row) for row in rows]
        finally:
            conn.close()

    def delete(self, expense_id: str) -> None:
        self._write("DELETE FROM expenses WHERE id = ?", (expense_id,))
