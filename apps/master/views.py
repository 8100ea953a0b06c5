from django.http import JsonResponse

from .forms import generate_code_name


def product_code_name(request):
    """Suggest a code name for the product name typed so far (``?Name=``)."""
    name = request.GET.get('Name', '').strip()
    if not name:
        return JsonResponse({'status': {'message': 'Enter a product name first.'}}, status=400)
    return JsonResponse({'CodeName': generate_code_name(name)})
