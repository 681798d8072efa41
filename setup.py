from setuptools import setup

setup(
    name='atmfjstc-bit-combinations',
    version='0.1.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.bit_combinations'],

    extras_require={
        'test': ['pytest'],
    },

    zip_safe=True,

    description="Enumerates fixed-width integers with a given number of bits set",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
