import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="pymohr",
    version="0.1.0",
    author="Eric J. Whitney",
    author_email="eric.j.whitney@optusnet.removethispart.com.au",
    description="Plane stress and strain states with Mohr's circle "
                "transformations.",
    include_package_data=True,
    install_requires=[
        'numpy'
    ],
    extras_require={
        'test': ['pytest']
    },
    keywords='stress strain mohr circle structures engineering',
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/ericjwhitney/pymohr",
    packages=setuptools.find_packages(include=['pymohr', 'pymohr.*']),
    python_requires='>=3.10',
    classifiers=[
        "Development Status :: 2 - Pre-Alpha",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.10",
        "Topic :: Scientific/Engineering"
    ]
)
