"""
Job Board core package.

Holds the pieces of the board that carry actual logic:
- models: the closed Job record and its enums
- filters: the four-predicate search/filter engine
- formatting: salary and display formatting
- apply: the application dispatcher (email vs external link)
- forms: the post-job form boundary
- repositories: the JobRepository collaborator
- auth: the auth collaborator and the per-request auth context
"""
