from setuptools import setup, find_packages

setup(
    name="happy-poisson",
    version="0.1.0",
    description="Poisson arrival counting for load generators and deterministic simulations",
    author="adamfilli",
    packages=find_packages(include=["happypoisson", "happypoisson.*"]),
    install_requires=[
        "numpy",
    ],
    extras_require={
        "test": [
            "pytest",
            "matplotlib",
        ],
    },
    include_package_data=True,
    python_requires=">=3.10",
)
