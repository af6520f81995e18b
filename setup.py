from setuptools import find_packages, setup


setup(
    name="graph-analysis-service",
    version="0.1.0",
    description="Graph editor persistence and analysis algorithms service",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "pydantic>=2.0.0",
        "fastapi>=0.100.0",
        "uvicorn>=0.22.0",
        "psycopg2-binary>=2.9.0",
        "prometheus-client>=0.17.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
            "httpx>=0.24.0",
        ],
    },
)
