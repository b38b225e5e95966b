import os
from lawsuits.api.server import create_app

app = create_app()

if __name__ == "__main__":
    port = int(os.environ.get("PORT", "3000"))
    # Check for production mode
    if os.environ.get("APP_ENV") == "production":
        from waitress import serve
        print(f"Starting production server with Waitress on port {port}...")
        serve(app, host="0.0.0.0", port=port)
    else:
        print("Starting development server...")
        app.run(debug=True, port=port, host="0.0.0.0")
