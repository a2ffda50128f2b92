"""Conditional formatting rules, rule kinds and their grouping into formats."""