"""Helpers that inspect and manage AWS resources through client objects passed in by the caller."""