"""Learners module: creation of learner rows.  Login screens live elsewhere."""
