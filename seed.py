"""
seed.py
Default dataset copied into the stores on first run.
"""

from __future__ import annotations

from models import User

_TS = "2025-01-01T00:00:00+00:00"


def _avatar(seed_name: str) -> str:
    return f"https://api.dicebear.com/7.x/avataaars/svg?seed={seed_name}"


SEED_USERS = [
    {
        "id": "u-admin-001", "name": "Admin Gym", "email": "admin@example.com", "password": "admin123",
        "role": "admin", "phone": "081200000001", "gender": "male", "address": "Jl. Sudirman No. 1, Jakarta",
        "avatar": _avatar("admin"),
    },
    {
        "id": "u-staff-001", "name": "Siti Rahma", "email": "staff@example.com", "password": "staff123",
        "role": "staff", "phone": "081200000002", "gender": "female", "address": "Jl. Thamrin No. 5, Jakarta",
        "avatar": _avatar("siti"),
    },
    {
        "id": "u-trainer-001", "name": "Budi Santoso", "email": "budi.trainer@example.com", "password": "trainer123",
        "role": "trainer", "phone": "081200000003", "gender": "male", "address": "Jl. Gatot Subroto No. 9, Jakarta",
        "avatar": _avatar("budi"),
    },
    {
        "id": "u-trainer-002", "name": "Dewi Lestari", "email": "dewi.trainer@example.com", "password": "trainer123",
        "role": "trainer", "phone": "081200000004", "gender": "female", "address": "Jl. Kuningan No. 12, Jakarta",
        "avatar": _avatar("dewi"),
    },
    {
        "id": "u-trainer-003", "name": "Rizky Pratama", "email": "rizky.trainer@example.com", "password": "trainer123",
        "role": "trainer", "phone": "081200000005", "gender": "male", "address": "Jl. Rasuna Said No. 3, Jakarta",
        "avatar": _avatar("rizky"),
    },
    {
        "id": "u-member-001", "name": "Andi Wijaya", "email": "andi@example.com", "password": "member123",
        "role": "member", "phone": "081300000001", "gender": "male", "address": "Jl. Melati No. 4, Depok",
        "birth_date": "1994-03-12", "blood_type": "O", "avatar": _avatar("andi"),
    },
    {
        "id": "u-member-002", "name": "Putri Ayu", "email": "putri@example.com", "password": "member123",
        "role": "member", "phone": "081300000002", "gender": "female", "address": "Jl. Kenanga No. 8, Bekasi",
        "birth_date": "1998-07-21", "blood_type": "A", "avatar": _avatar("putri"),
    },
    {
        "id": "u-member-003", "name": "Hendra Gunawan", "email": "hendra@example.com", "password": "member123",
        "role": "member", "phone": "081300000003", "gender": "male", "address": "Jl. Mawar No. 2, Tangerang",
        "birth_date": "1989-11-02", "blood_type": "B", "is_active": False, "avatar": _avatar("hendra"),
    },
    {
        "id": "u-member-004", "name": "Maya Sari", "email": "maya@example.com", "password": "member123",
        "role": "member", "phone": "081300000004", "gender": "female", "address": "Jl. Anggrek No. 15, Jakarta",
        "birth_date": "2000-01-30", "blood_type": "AB", "avatar": _avatar("maya"),
    },
    {
        "id": "u-member-005", "name": "Fajar Nugroho", "email": "fajar@example.com", "password": "member123",
        "role": "member", "phone": "081300000005", "gender": "male", "address": "Jl. Dahlia No. 7, Bogor",
        "birth_date": "1996-05-18", "blood_type": "O", "avatar": _avatar("fajar"),
    },
    {
        "id": "u-member-006", "name": "Lina Kartika", "email": "lina@example.com", "password": "member123",
        "role": "member", "phone": "081300000006", "gender": "female", "address": "Jl. Cempaka No. 11, Jakarta",
        "birth_date": "1992-09-09", "blood_type": "A", "avatar": _avatar("lina"),
    },
]

SEED_PACKAGES = [
    {
        "id": "pkg-001", "name": "Bulanan", "description": "Akses gym penuh selama 1 bulan",
        "duration_days": 30, "price": 350000, "features": ["Akses gym", "Loker"], "is_active": True,
        "created_at": _TS,
    },
    {
        "id": "pkg-002", "name": "3 Bulan", "description": "Akses gym penuh selama 3 bulan",
        "duration_days": 90, "price": 950000, "features": ["Akses gym", "Loker", "1x konsultasi trainer"],
        "is_active": True, "created_at": _TS,
    },
    {
        "id": "pkg-003", "name": "6 Bulan", "description": "Akses gym dan kelas selama 6 bulan",
        "duration_days": 180, "price": 1800000, "features": ["Akses gym", "Loker", "Kelas grup"],
        "is_active": True, "created_at": _TS,
    },
    {
        "id": "pkg-004", "name": "Tahunan VIP", "description": "Akses penuh 12 bulan dengan fasilitas VIP",
        "duration_days": 365, "price": 3200000,
        "features": ["Akses gym", "Loker VIP", "Kelas grup", "Handuk", "Sauna"],
        "is_active": True, "created_at": _TS,
    },
    {
        "id": "pkg-005", "name": "Harian", "description": "Tiket masuk satu hari",
        "duration_days": 1, "price": 50000, "features": ["Akses gym"], "is_active": False,
        "created_at": _TS,
    },
]

SEED_MEMBERSHIPS = [
    {
        "id": "ms-001", "member_id": "u-member-001", "package_id": "pkg-002", "start_date": "2026-08-01",
        "end_date": "2026-10-30", "status": "active", "notes": "", "created_at": "2026-08-01T00:00:00+00:00",
    },
    {
        "id": "ms-002", "member_id": "u-member-002", "package_id": "pkg-001", "start_date": "2026-09-25",
        "end_date": "2026-10-25", "status": "active", "notes": "", "created_at": "2026-09-25T00:00:00+00:00",
    },
    {
        "id": "ms-003", "member_id": "u-member-003", "package_id": "pkg-001", "start_date": "2026-05-01",
        "end_date": "2026-05-31", "status": "expired", "notes": "Tidak diperpanjang",
        "created_at": "2026-05-01T00:00:00+00:00",
    },
    {
        "id": "ms-004", "member_id": "u-member-004", "package_id": "pkg-003", "start_date": "2026-06-01",
        "end_date": "2026-11-28", "status": "frozen", "notes": "Cuti 1 bulan",
        "created_at": "2026-06-01T00:00:00+00:00",
    },
    {
        "id": "ms-005", "member_id": "u-member-005", "package_id": "pkg-001", "start_date": "2026-10-15",
        "end_date": "2026-11-14", "status": "pending", "notes": "Menunggu pembayaran",
        "created_at": "2026-10-15T00:00:00+00:00",
    },
    {
        "id": "ms-006", "member_id": "u-member-006", "package_id": "pkg-004", "start_date": "2026-01-10",
        "end_date": "2027-01-10", "status": "active", "notes": "Member VIP",
        "created_at": "2026-01-10T00:00:00+00:00",
    },
]

SEED_PAYMENTS = [
    {
        "id": "pay-001", "membership_id": "ms-001", "member_id": "u-member-001", "amount": 950000,
        "method": "transfer", "status": "paid", "invoice_number": "INV-2608-0001", "notes": "",
        "paid_at": "2026-08-01T09:15:00+00:00", "created_at": "2026-08-01T09:15:00+00:00",
    },
    {
        "id": "pay-002", "membership_id": "ms-002", "member_id": "u-member-002", "amount": 350000,
        "method": "qris", "status": "paid", "invoice_number": "INV-2609-0002", "notes": "",
        "paid_at": "2026-09-25T17:40:00+00:00", "created_at": "2026-09-25T17:40:00+00:00",
    },
    {
        "id": "pay-003", "membership_id": "ms-003", "member_id": "u-member-003", "amount": 350000,
        "method": "cash", "status": "paid", "invoice_number": "INV-2605-0003", "notes": "",
        "paid_at": "2026-05-01T10:00:00+00:00", "created_at": "2026-05-01T10:00:00+00:00",
    },
    {
        "id": "pay-004", "membership_id": "ms-004", "member_id": "u-member-004", "amount": 1800000,
        "method": "debit", "status": "paid", "invoice_number": "INV-2606-0004", "notes": "",
        "paid_at": "2026-06-01T11:30:00+00:00", "created_at": "2026-06-01T11:30:00+00:00",
    },
    {
        "id": "pay-005", "membership_id": "ms-005", "member_id": "u-member-005", "amount": 350000,
        "method": "transfer", "status": "pending", "invoice_number": "INV-2610-0005", "notes": "",
        "paid_at": "2026-10-15T08:00:00+00:00", "created_at": "2026-10-15T08:00:00+00:00",
    },
    {
        "id": "pay-006", "membership_id": "ms-006", "member_id": "u-member-006", "amount": 3200000,
        "method": "transfer", "status": "paid", "invoice_number": "INV-2601-0006", "notes": "",
        "paid_at": "2026-01-10T13:20:00+00:00", "created_at": "2026-01-10T13:20:00+00:00",
    },
]

DEFAULT_PT_PACKAGES = [
    {
        "id": "pt-pkg-001", "name": "4 Sesi PT", "sessions": 4, "price_per_session": 150000,
        "total_price": 600000, "description": "Paket personal trainer 4 sesi, cocok untuk pemula",
        "is_active": True, "created_at": _TS,
    },
    {
        "id": "pt-pkg-002", "name": "8 Sesi PT", "sessions": 8, "price_per_session": 140000,
        "total_price": 1120000, "description": "Paket personal trainer 8 sesi, paling populer",
        "is_active": True, "created_at": _TS,
    },
    {
        "id": "pt-pkg-003", "name": "12 Sesi PT", "sessions": 12, "price_per_session": 125000,
        "total_price": 1500000, "description": "Paket personal trainer 12 sesi, hemat 17%",
        "is_active": True, "created_at": _TS,
    },
    {
        "id": "pt-pkg-004", "name": "16 Sesi PT", "sessions": 16, "price_per_session": 115000,
        "total_price": 1840000, "description": "Paket personal trainer 16 sesi, hemat 23%",
        "is_active": True, "created_at": _TS,
    },
    {
        "id": "pt-pkg-005", "name": "24 Sesi PT", "sessions": 24, "price_per_session": 100000,
        "total_price": 2400000, "description": "Paket personal trainer 24 sesi, harga terbaik!",
        "is_active": True, "created_at": _TS,
    },
]

DEFAULT_PT_SUBSCRIPTIONS = [
    {
        "id": "pt-sub-001", "member_id": "u-member-002", "trainer_id": "u-trainer-001",
        "pt_package_id": "pt-pkg-002", "total_sessions": 8, "used_sessions": 3, "status": "active",
        "start_date": "2026-09-20", "end_date": "2026-11-20", "notes": "Program diet & fitness",
        "created_at": "2026-09-20T00:00:00+00:00",
    },
    {
        "id": "pt-sub-002", "member_id": "u-member-005", "trainer_id": "u-trainer-001",
        "pt_package_id": "pt-pkg-002", "total_sessions": 8, "used_sessions": 2, "status": "active",
        "start_date": "2026-10-01", "end_date": "2026-12-01", "notes": "Program bulking",
        "created_at": "2026-10-01T00:00:00+00:00",
    },
    {
        "id": "pt-sub-003", "member_id": "u-member-006", "trainer_id": "u-trainer-003",
        "pt_package_id": "pt-pkg-003", "total_sessions": 12, "used_sessions": 8, "status": "active",
        "start_date": "2026-08-01", "end_date": "2026-12-01", "notes": "Member VIP tahunan",
        "created_at": "2026-08-01T00:00:00+00:00",
    },
    {
        "id": "pt-sub-004", "member_id": "u-member-004", "trainer_id": "u-trainer-002",
        "pt_package_id": "pt-pkg-001", "total_sessions": 4, "used_sessions": 4, "status": "completed",
        "start_date": "2026-06-01", "end_date": "2026-06-30", "notes": "",
        "created_at": "2026-06-01T00:00:00+00:00",
    },
]

DEFAULT_CLASSES = [
    {"id": "cls-zumba", "name": "Zumba", "category": "cardio",
     "description": "Olahraga kardio berbasis tarian Latin yang menyenangkan"},
    {"id": "cls-spinning", "name": "Spinning", "category": "cardio",
     "description": "Latihan sepeda statis intensitas tinggi"},
    {"id": "cls-aerobik", "name": "Aerobik", "category": "cardio",
     "description": "Gerakan aerobik untuk meningkatkan stamina dan kebugaran"},
    {"id": "cls-bodypump", "name": "Body Pump", "category": "strength",
     "description": "Latihan beban dengan barbel untuk seluruh tubuh"},
    {"id": "cls-crossfit", "name": "CrossFit", "category": "strength",
     "description": "Program latihan fungsional intensitas tinggi"},
    {"id": "cls-kettlebell", "name": "Kettlebell", "category": "strength",
     "description": "Latihan kekuatan menggunakan kettlebell"},
    {"id": "cls-trx", "name": "TRX", "category": "functional",
     "description": "Suspension training untuk kekuatan dan stabilitas"},
    {"id": "cls-bootcamp", "name": "Bootcamp", "category": "functional",
     "description": "Latihan HIIT gabungan kardio dan kekuatan"},
    {"id": "cls-yoga", "name": "Yoga", "category": "mind-body",
     "description": "Latihan fleksibilitas, kekuatan, dan ketenangan pikiran"},
    {"id": "cls-pilates", "name": "Pilates", "category": "mind-body",
     "description": "Latihan core, postur, dan fleksibilitas"},
    {"id": "cls-bodybalance", "name": "Body Balance", "category": "mind-body",
     "description": "Kombinasi Yoga, Tai Chi, dan Pilates"},
]


def seed_user(data: dict, password_hash: str) -> User:
    """Build a User from a seed entry, swapping the plaintext password for its hash."""
    fields = {k: v for k, v in data.items() if k != "password"}
    fields.setdefault("created_at", _TS)
    fields.setdefault("updated_at", _TS)
    return User.from_dict({**fields, "password_hash": password_hash})
