from setuptools import setup

setup(
    name='atmfjstc-zip-fields',
    version='1.0.0',

    author_email='atmfjstc@protonmail.com',

    package_dir={'': 'src'},
    packages=['atmfjstc.lib.zip_fields'],

    install_requires=[
        'atmfjstc-ez-repr>=1.1, <2',
    ],

    zip_safe=True,

    description="Value type for the 4-byte little-endian fields and signatures found in ZIP headers",

    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Topic :: System :: Archiving",
        "Typing :: Typed",
    ],
    python_requires='>=3.7',
)
