"""Exception type shared by every stage of query handling."""


class TinySQLError(Exception):
    """Raised for syntax, type and lookup errors while handling a query."""