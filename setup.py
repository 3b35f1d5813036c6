from setuptools import setup, find_packages

setup(
    name="fa-lib",
    version="0.1.0",
    description="Linear function approximation for reinforcement learning value estimation",
    packages=find_packages(),
    install_requires=[
        "numpy>=1.24.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    python_requires=">=3.8",
)
