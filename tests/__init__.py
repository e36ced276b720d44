"""
Tests for the developer roster

Tests are organized by functionality:
- test_paths.py / test_form_state.py / test_developer_form.py: form handling
- test_entities.py / test_developer_service.py: domain rules and persistence
- api/: REST endpoints and server-rendered pages
- test_developers_client.py / test_manage_devs.py: HTTP client and CLI
"""
