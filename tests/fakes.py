from utils.exceptions import AccountDirectoryError, NotificationError


class FakeDirectory:
    """In-memory account directory recording every call."""

    def __init__(self, users=None, fail_lookup=False, fail_update=False):
        self.users = {u['email']: dict(u) for u in (users or [])}
        self.fail_lookup = fail_lookup
        self.fail_update = fail_update
        self.lookups = []
        self.updates = []

    def find_by_email(self, email):
        self.lookups.append(email)
        if self.fail_lookup:
            raise AccountDirectoryError("lookup failed")
        return self.users.get(email)

    def update_credential_hash(self, user_id, password_hash):
        self.updates.append((user_id, password_hash))
        if self.fail_update:
            raise AccountDirectoryError("update failed")
        for user in self.users.values():
            if user['id'] == user_id:
                user['encrypted_password'] = password_hash


class FakeSender:
    def __init__(self, fail=False):
        self.fail = fail
        self.sent = []

    def send(self, message, domain):
        self.sent.append((message, domain))
        if self.fail:
            raise NotificationError("Mailgun rejected message (401): Forbidden")
        return "<msg-id@example.com>"


