"""Expected link blocks for the bakery fixtures."""


def bakery_links(bakery_id: object) -> dict:
    return {
        "self": {"method": "GET", "href": f"/api/v1/bakeries/{bakery_id}", "comment": "get a bakery by id"},
        "index": {"method": "GET", "href": "/api/v1/bakeries", "comment": "get all bakeries"},
        "post": {"method": "POST", "href": "/api/v1/bakeries", "comment": "create a new bakery"},
        "patch": {"method": "PATCH", "href": f"/api/v1/bakeries/{bakery_id}", "comment": "partially update a bakery"},
        "delete": {"method": "DELETE", "href": f"/api/v1/bakeries/{bakery_id}", "comment": "delete this bakery"},
    }


def cupcake_links(cupcake_id: object, name: object) -> dict:
    return {
        "self": {"method": "GET", "href": f"/api/v1/cupcakes/{cupcake_id}", "comment": "get a cupcake by id"},
        "index": {"method": "GET", "href": "/api/v1/cupcakes", "comment": "get all cupcakes"},
        "by_name": {"method": "GET", "href": f"/api/v1/cupcakes?name={name}", "comment": "find cupcakes by name"},
    }
