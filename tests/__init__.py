# tests/__init__.py
"""
DyeLab Predictor - Test Suite
=============================

Test suite covering:
- Unit tests for the removal model and prediction outcome
- Presentation state handlers (field/slider sync, preset, predict)
- Validation and parsing of field text
- Exports (CSV, Word) and response curves
- UI tests (Streamlit AppTest)

Run all tests:
    pytest tests/ -v

Run with coverage:
    pytest tests/ --cov=dyelab --cov-report=html

Run specific test file:
    pytest tests/test_models.py -v
"""
