LISTING_MARKER = "#GENERATED_LISTING#"
BODY_MARKER = "#GENERATED_BODY#"

README_TEMPLATE = """#### GeckoPackages

# PHPUnit extensions

Provides additional asserts to be used in [PHPUnit](https://phpunit.de/) tests.
The asserts are provided using Traits so no changes are needed in the hierarchy of test classes.

The additional asserts are provided through the Traits:
#GENERATED_LISTING#

See Traits and asserts listing for more details.

### Requirements

PHP 7 / PHPUnit 6

<sub>Use ^v2.0 if you are using PHPUnit 5.</sub>

### Install

The package can be installed using [Composer](https://getcomposer.org/).
Add the package to your `composer.json`.

```
"require-dev": {
    "gecko-packages/gecko-php-unit" : "^3.0"
}
```

<sub>Please note we hint `-dev` here because typically you only need tests during development.</sub>

### Usage

Example usage of `FileSystemAssertTrait`.

```php
class myTest extends \\PHPUnit_Framework_TestCase
{
    use \\GeckoPackages\\PHPUnit\\Asserts\\FileSystemAssertTrait;

    public function testFilePermissionsOfThisFile()
    {
        $this->assertFileHasPermissions('lrwxrwxrwx', __FILE__);
    }
}

```

# Traits and asserts listing
#GENERATED_BODY#
### License

The project is released under the MIT license, see the LICENSE file.

### Contributions

Contributions are welcome!

### Semantic Versioning

This project follows [Semantic Versioning](http://semver.org/).

<sub>Kindly note:
We do not keep a backwards compatible promise on code annotated with `@internal`, the tests and tooling (such as document generation) of the project itself
nor the content and/or format of exception/error messages.</sub>
"""


def fill(listing: str, body: str, template: str = README_TEMPLATE) -> str:
    return template.replace(LISTING_MARKER, listing).replace(BODY_MARKER, body)
