"""
list-filter - Test Suite

Test Organization:
- test_values.py: Parsing of submitted values
- test_accumulator.py: FilterAccumulator precedence, fragments, conditions
- test_session.py: Session and request adapters
- test_query.py: SELECT building and list queries
- test_config.py: Settings loading
- test_utils.py: Logging setup
- test_quickstart_docs.py: README examples

Fixtures are in tests/fixtures/:
- books.py: Sample book table

Run tests:
    $ pytest tests/ -v
"""
