"""
Workbook Management Service
SQLAlchemy extension instance shared by all models.

Models:
    - company.Company:                training-provider company (scoping unit)
    - submission.Submission:          bundle of three workbooks with an approval decision
    - submission.WorkbookSubmission:  one workbook; its document lives in a JSON text column
"""

from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()
