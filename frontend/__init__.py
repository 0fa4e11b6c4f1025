"""
Job Board UI - Flask + HTMX frontend for browsing and posting jobs.

Provides a card view of postings with live search and filters, a detail
view, apply links and a post-a-job form.
"""
