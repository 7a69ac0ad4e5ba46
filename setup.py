import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="roompair",
    version="0.1.0",
    author="Roompair developers",
    description="Randomized pairing of people into rooms of two by mutual preference",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=['numpy', 'scipy', 'numba'],
    extras_require={'test': ['pytest']},
    entry_points={'console_scripts': ['roompair=roompair.__main__:main']},
    python_requires='>=3.11',
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
