"""
Quick demo script to run the ShopAI backend locally.

This script starts a local server and shows how to make requests to the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting ShopAI Backend Demo")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:  GET  http://localhost:8000/health")
    print("   - Catalog:       GET  http://localhost:8000/products")
    print("   - State:         GET  http://localhost:8000/recommendations/state")
    print("   - Query:         POST http://localhost:8000/recommendations/query")
    print("   - Reset:         POST http://localhost:8000/recommendations/reset")
    print("   - API Docs:           http://localhost:8000/docs")
    print()
    print("🔐 Configuration:")
    print("   Set GOOGLE_API_KEY in .env before querying recommendations.")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/recommendations/query" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"query": "gaming laptop under 1500"}\'')
    print()
    print("=" * 60)
    print("Starting server on http://localhost:8000")
    print("Press Ctrl+C to stop")
    print("=" * 60)
    print()

    uvicorn.run(
        "shopai.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
