"""
scoring/ - Performance Scoring Engine

Modules:
    utils.py                    - Decimal utilities
    grading.py                  - Percentage → performance grade
    category_calculator.py      - Weighted category aggregation and weight balance
    review_calculator.py        - Behavioural / technical reviews and competency gaps
    period_score_calculator.py  - HRD deduction, percentage and period score
    engine.py                   - ScoringEngine facade configured from Settings
"""
