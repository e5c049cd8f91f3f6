"""Run the mock quote/order API with uvicorn (PORT, default 8001)."""

from fx_mock_api.main import main

if __name__ == "__main__":
    main()
