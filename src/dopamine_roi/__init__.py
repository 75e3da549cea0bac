"""Dopamine ROI assessment service.

Lead-generation quiz backend for the ADHD Founder marketing site. Scores the
Dopamine ROI questionnaire, buckets respondents into one of four categories,
stores results and referral activity, and triggers the results email and
CRM subscription.
"""

__version__ = "0.1.0"
