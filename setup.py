from setuptools import find_packages, setup

if __name__ == "__main__":
    setup(
        name="picoblake2",
        version="0.1.0",
        description="Picoblake2 BLAKE2b / BLAKE2s hashing (RFC 7693)",
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        python_requires=">=3.10",
        extras_require={"test": ["pytest"]},
    )
