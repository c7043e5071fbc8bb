from flask_restful import Resource, Api, reqparse
from flatshare.schemas.shopping_list_schema import ProductSuggestionSchema
from flatshare.service.shopping_list_service import ShoppingListService
from flatshare.utils.decorators import login_required
from . import suggestion_bp

api = Api(suggestion_bp)

suggestions_schema = ProductSuggestionSchema(many=True)


class ProductSuggestionResource(Resource):
    @login_required
    def get(self):
        parser = reqparse.RequestParser()
        parser.add_argument("q", type=str, default="", location="args")
        args = parser.parse_args()

        suggestions = ShoppingListService.search_product_suggestions(args["q"])
        return suggestions_schema.dump(suggestions), 200


api.add_resource(ProductSuggestionResource, "/suggestions")
