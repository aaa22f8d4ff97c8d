"""
Admin credential helper.
Creates and manages the rows checked by the admin login.

Usage:
    python manage_admins.py --create <username> <password>
    python manage_admins.py --password <username> <new-password>
    python manage_admins.py --delete <username>
    python manage_admins.py --list
"""

import sys
from datetime import datetime, timezone

import database
from schemas import ADMIN_CREDENTIAL, AdminCredential
from security import hash_password


def create_admin(username, password):
    """Create a new admin credential row"""
    username = username.strip()
    collection = database.get_db()[ADMIN_CREDENTIAL]
    if collection.find_one({"username": username}):
        print(f"Admin '{username}' already exists!")
        return False

    database.create_document(ADMIN_CREDENTIAL, AdminCredential(username=username, password_hash=hash_password(password)))
    print(f"Admin '{username}' created.")
    return True


def set_password(username, password):
    res = database.get_db()[ADMIN_CREDENTIAL].update_one(
        {"username": username.strip()},
        {"$set": {"password_hash": hash_password(password), "updated_at": datetime.now(timezone.utc)}},
    )
    if res.matched_count == 0:
        print(f"Admin '{username}' not found.")
        return False
    print(f"Password updated for '{username}'.")
    return True


def delete_admin(username):
    res = database.get_db()[ADMIN_CREDENTIAL].delete_one({"username": username.strip()})
    if res.deleted_count == 0:
        print(f"Admin '{username}' not found.")
        return False
    print(f"Admin '{username}' deleted.")
    return True


def list_admins():
    rows = list(database.get_db()[ADMIN_CREDENTIAL].find({}, {"password_hash": 0}).sort("username", 1))
    if not rows:
        print("No admin credentials found. The ADMIN_USERNAME / ADMIN_PASSWORD env pair is in use.")
        return []
    for row in rows:
        created = row.get("created_at")
        print(f"{row['username']:<24} {created.isoformat() if created else '-'}")
    return [row["username"] for row in rows]


def main(argv):
    if len(argv) < 2:
        print(__doc__)
        return 1

    command = argv[1]
    if command == "--create" and len(argv) == 4:
        return 0 if create_admin(argv[2], argv[3]) else 1
    if command == "--password" and len(argv) == 4:
        return 0 if set_password(argv[2], argv[3]) else 1
    if command == "--delete" and len(argv) == 3:
        return 0 if delete_admin(argv[2]) else 1
    if command == "--list":
        list_admins()
        return 0

    print(f"Unknown or incomplete command: {' '.join(argv[1:])}")
    print(__doc__)
    return 1


if __name__ == "__main__":
    sys.exit(main(sys.argv))
