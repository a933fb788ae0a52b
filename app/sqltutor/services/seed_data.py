"""
Purpose: The documented sample dataset every session starts from.
Both the query engine (DDL + rows) and the `tables` / `desc` commands read
from here, so the listing never drifts from what is actually loaded.
"""

from __future__ import annotations

SCHEMAS: dict[str, list[tuple[str, str]]] = {
    "students": [
        ("id", "INT PRIMARY KEY"),
        ("name", "VARCHAR(100)"),
        ("age", "INT"),
        ("grade", "VARCHAR(10)"),
        ("class", "VARCHAR(20)"),
    ],
    "products": [
        ("id", "INT PRIMARY KEY"),
        ("name", "VARCHAR(100)"),
        ("price", "INT"),
        ("category", "VARCHAR(50)"),
        ("stock", "INT"),
    ],
    "orders": [
        ("id", "INT PRIMARY KEY"),
        ("customer_name", "VARCHAR(100)"),
        ("product_id", "INT"),
        ("quantity", "INT"),
        ("order_date", "DATE"),
    ],
    "employees": [
        ("id", "INT PRIMARY KEY"),
        ("name", "VARCHAR(100)"),
        ("department", "VARCHAR(50)"),
        ("salary", "INT"),
        ("hire_date", "DATE"),
    ],
}

SEED_ROWS: dict[str, list[tuple]] = {
    "students": [
        (1, "Nguyễn Văn An", 20, "A", "CNTT1"),
        (2, "Trần Thị Bình", 21, "B", "CNTT1"),
        (3, "Lê Văn Cường", 19, "A", "CNTT2"),
        (4, "Phạm Thị Dung", 22, "C", "CNTT2"),
        (5, "Hoàng Văn Em", 20, "B", "CNTT1"),
    ],
    "products": [
        (1, "Laptop Dell", 15000000, "Điện tử", 10),
        (2, "iPhone 15", 25000000, "Điện tử", 5),
        (3, "Bàn phím cơ", 1500000, "Phụ kiện", 30),
        (4, "Chuột không dây", 500000, "Phụ kiện", 50),
        (5, "Màn hình 27 inch", 7000000, "Điện tử", 8),
        (6, "Tai nghe Bluetooth", 1200000, "Phụ kiện", 25),
    ],
    "orders": [
        (1, "Nguyễn Văn An", 1, 1, "2024-01-15"),
        (2, "Trần Thị Bình", 3, 2, "2024-01-16"),
        (3, "Lê Văn Cường", 2, 1, "2024-01-17"),
        (4, "Nguyễn Văn An", 4, 3, "2024-01-18"),
        (5, "Phạm Thị Dung", 6, 1, "2024-01-20"),
        (6, "Hoàng Văn Em", 5, 2, "2024-01-21"),
    ],
    "employees": [
        (1, "Đỗ Minh Khoa", "IT", 20000000, "2020-03-01"),
        (2, "Vũ Thị Lan", "HR", 15000000, "2019-07-15"),
        (3, "Bùi Văn Mạnh", "IT", 25000000, "2018-01-10"),
        (4, "Ngô Thị Nga", "Sales", 18000000, "2021-05-20"),
        (5, "Đặng Văn Phúc", "Sales", 16000000, "2022-09-01"),
    ],
}


def seed_counts() -> dict[str, int]:
    return {name: len(rows) for name, rows in SEED_ROWS.items()}
