"""
Core Views - the List-Detail-Mutate pages shared by every entity

One set of function views serves every registered resource; the section
URLconfs pass ``section`` and the resource ``key`` in. Full page loads always
fetch from the backend. htmx requests issued from an already rendered page
(page flips, inline deletes, the detail overlay) work on the session snapshot
and return partials.
"""
import logging

from django.contrib import messages
from django.http import Http404, HttpResponse, JsonResponse
from django.shortcuts import redirect, render

from .api.client import ApiClient
from .api.errors import ApiError, JoinError
from .cascade import RESOLVERS, resolve_channel, resolve_city, resolve_product, resolve_province
from .exports import CONTENT_TYPES, DetailExporter
from .lookups import LookupCache
from .overlay import DetailOverlay
from .resources import SECTIONS, get_resource, section_resources
from .store import CollectionStore

logger = logging.getLogger(__name__)


def dashboard(request):
    sections = [
        {'key': key, 'label': label, 'resources': section_resources(key)}
        for key, label in SECTIONS.items()
    ]
    return render(request, 'core/dashboard.html', {'sections': sections})


def section_index(request, section):
    """Overview of one section: record counts of its featured collections."""
    if section not in SECTIONS:
        raise Http404(f"Unknown section: {section}")

    resources = section_resources(section)
    featured = [r for r in resources if r.featured]
    counts, error = {}, None
    try:
        fetched = ApiClient().fetch_many({r.key: (r.path, r.serializer) for r in featured})
    except JoinError as e:
        error = e.message
    else:
        counts = {name: len(items) for name, items in fetched.items()}

    cards = [{'resource': r, 'count': counts.get(r.key)} for r in featured]
    return render(request, 'core/section.html', {
        'section': section,
        'section_label': SECTIONS[section],
        'resources': resources,
        'cards': cards,
        'error': error,
    })


# ----------------------------------------------------------------------
# Collection pages
# ----------------------------------------------------------------------

def _page_store(request, resource):
    """The store the current page was rendered from; loads it if there is none."""
    store = CollectionStore.restore(resource, request.session)
    if store is None:
        store = CollectionStore(resource).load()
        if store.error is None:
            store.save(request.session)
    return store


def _table_context(resource, store, offset):
    return {
        'resource': resource,
        'store': store,
        'window': store.window(offset),
        'error': store.error,
    }


def collection_list(request, section, key):
    resource = get_resource(key, section)
    offset = request.GET.get('offset', 0)

    if request.htmx:
        store = _page_store(request, resource)
        return render(request, 'core/partials/collection_table.html',
                      _table_context(resource, store, offset))

    store = CollectionStore(resource).load()
    if store.error is None:
        store.save(request.session)
    return render(request, 'core/collection_list.html', _table_context(resource, store, offset))


def record_delete(request, section, key, code):
    resource = get_resource(key, section)
    if request.method != 'POST':
        return redirect(resource.url('list'))

    store = _page_store(request, resource) if request.htmx else CollectionStore(resource)
    try:
        store.delete(code)
    except ApiError as e:
        messages.error(request, e.message)
    else:
        LookupCache().invalidate(resource.key)
        if request.htmx:
            store.save(request.session)
        messages.success(request, f"{resource.label} {code} deleted.")

    if request.htmx:
        return render(request, 'core/partials/collection_table.html',
                      _table_context(resource, store, request.POST.get('offset', 0)))
    return redirect(resource.url('list'))


# ----------------------------------------------------------------------
# Forms
# ----------------------------------------------------------------------

def _form_lookups(form_class):
    """Every dropdown collection the form needs, in one concurrent round trip."""
    names = form_class.lookup_names()
    if not names:
        return {}, None
    try:
        return LookupCache().get_many(names), None
    except JoinError as e:
        return {}, e.message


def _render_form(request, resource, form, title, error=None, **extra):
    context = {'resource': resource, 'form': form, 'title': title, 'error': error}
    context.update(extra)
    return render(request, 'core/form.html', context)


def record_create(request, section, key):
    resource = get_resource(key, section)
    form_class = resource.form_class
    if form_class is None:
        raise Http404(f"{resource.plural} are read-only")

    lookups, error = _form_lookups(form_class)
    title = f"Add {resource.label}"

    if request.method == 'POST':
        form = form_class(request.POST, lookups=lookups)
        if form.is_valid():
            try:
                ApiClient().create(resource.path, form.to_payload(),
                                   default_error=f"Failed to create {resource.label.lower()}.")
            except ApiError as e:
                messages.error(request, form.error_message(e.message))
            else:
                LookupCache().invalidate(resource.key)
                messages.success(request, f"{resource.label} created.")
                return redirect(resource.url('list'))
    else:
        form = form_class(lookups=lookups)
    return _render_form(request, resource, form, title, error)


def record_edit(request, section, key, code):
    resource = get_resource(key, section)
    form_class = resource.form_class
    if form_class is None:
        raise Http404(f"{resource.plural} are read-only")

    client = ApiClient()
    title = f"Edit {resource.label} {code}"
    try:
        record = client.get(resource.path, code, resource.serializer,
                            default_error=f"Failed to fetch {resource.label.lower()}.")
    except ApiError as e:
        return _render_form(request, resource, None, title, e.message)

    lookups, error = _form_lookups(form_class)

    if request.method == 'POST':
        form = form_class(request.POST, lookups=lookups, editing=True)
        if form.is_valid():
            try:
                client.update(resource.path, code, form.to_payload(),
                              default_error=f"Failed to update {resource.label.lower()}.")
            except ApiError as e:
                messages.error(request, form.error_message(e.message))
            else:
                LookupCache().invalidate(resource.key)
                messages.success(request, f"{resource.label} {code} updated.")
                return redirect(resource.url('list'))
    else:
        form = form_class(initial=form_class.initial_from_record(record), lookups=lookups, editing=True)
    return _render_form(request, resource, form, title, error, record=record)


# ----------------------------------------------------------------------
# Master-detail overlay
# ----------------------------------------------------------------------

def _detail_resource(section, key):
    resource = get_resource(key, section)
    if resource.detail is None:
        raise Http404(f"{resource.plural} have no details")
    return resource


def _page_overlay(request, resource, code):
    """The overlay as last rendered for ``code``; opens it when there is none."""
    overlay = DetailOverlay.restore(resource.detail, request.session, code)
    if overlay is None:
        overlay = DetailOverlay(resource.detail).open(code)
        overlay.save(request.session)
    return overlay


def _render_overlay(request, resource, overlay):
    context = {'resource': resource, 'detail': resource.detail, 'overlay': overlay}
    template = 'core/partials/overlay.html' if request.htmx else 'core/detail_page.html'
    return render(request, template, context)


def detail_overlay(request, section, key, code):
    resource = _detail_resource(section, key)
    overlay = DetailOverlay(resource.detail).open(code)
    overlay.save(request.session)
    return _render_overlay(request, resource, overlay)


def detail_close(request, section, key, code):
    resource = _detail_resource(section, key)
    overlay = DetailOverlay.restore(resource.detail, request.session, code)
    if overlay is not None:
        overlay.close()
        request.session.pop(overlay.session_key, None)
    if request.htmx:
        return HttpResponse('<div id="detail-overlay"></div>')
    return redirect(resource.url('list'))


def detail_create(request, section, key, code):
    resource = _detail_resource(section, key)
    detail = resource.detail
    if detail.form_class is None:
        raise Http404(f"{detail.label} rows are read-only")

    lookups, error = _form_lookups(detail.form_class)

    if request.method == 'POST':
        form = detail.form_class(request.POST, lookups=lookups)
        if form.is_valid():
            overlay = _page_overlay(request, resource, code)
            try:
                overlay.add_child(form.to_payload())
            except ApiError as e:
                messages.error(request, form.error_message(e.message))
            else:
                overlay.save(request.session)
                messages.success(request, f"{detail.label} added.")
                return redirect(resource.url('details', code))
    else:
        form = detail.form_class(lookups=lookups)
    return _render_form(request, resource, form, f"Add {detail.label} to {code}", error,
                        parent_code=code, back_url=resource.url('details', code))


def detail_edit(request, section, key, code, child):
    resource = _detail_resource(section, key)
    detail = resource.detail
    if detail.form_class is None:
        raise Http404(f"{detail.label} rows are read-only")

    overlay = _page_overlay(request, resource, code)
    row = overlay.find(child)
    if row is None:
        raise Http404(f"{detail.label} {child} not found")

    lookups, error = _form_lookups(detail.form_class)

    if request.method == 'POST':
        form = detail.form_class(request.POST, lookups=lookups, editing=True)
        if form.is_valid():
            try:
                overlay.update_child(child, form.to_payload())
            except ApiError as e:
                messages.error(request, form.error_message(e.message))
            else:
                overlay.save(request.session)
                messages.success(request, f"{detail.label} {child} updated.")
                return redirect(resource.url('details', code))
    else:
        form = detail.form_class(initial=detail.form_class.initial_from_record(row), lookups=lookups, editing=True)
    return _render_form(request, resource, form, f"Edit {detail.label} {child}", error,
                        parent_code=code, back_url=resource.url('details', code))


def detail_delete(request, section, key, code, child):
    resource = _detail_resource(section, key)
    if request.method != 'POST':
        return redirect(resource.url('details', code))

    overlay = _page_overlay(request, resource, code)
    try:
        overlay.delete_child(child)
    except ApiError as e:
        messages.error(request, e.message)
    except ValueError:
        messages.error(request, f"{resource.detail.label} list is not open.")
    else:
        overlay.save(request.session)
        messages.success(request, f"{resource.detail.label} {child} deleted.")

    if request.htmx:
        return _render_overlay(request, resource, overlay)
    return redirect(resource.url('details', code))


def detail_export(request, section, key, code, fmt):
    resource = _detail_resource(section, key)
    if fmt not in CONTENT_TYPES:
        raise Http404(f"Unsupported export format: {fmt}")

    overlay = _page_overlay(request, resource, code)
    filename, content_type, content = DetailExporter(resource.detail, overlay.parent_id, overlay.rows).export(fmt)
    logger.info(f"Exported {len(overlay.rows)} {resource.detail.key} rows as {filename}")

    response = HttpResponse(content, content_type=content_type)
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    return response


# ----------------------------------------------------------------------
# Cascading autofill
# ----------------------------------------------------------------------

AUTOFILL_LOOKUPS = {
    'city': ('cities', 'provinces', 'countries'),
    'province': ('provinces', 'countries'),
    'channel': ('channels',),
    'product': ('products',),
}


def lookup_autofill(request, kind):
    """JSON patch of the fields derived from the selected parent (``?value=``)."""
    if kind not in RESOLVERS:
        raise Http404(f"Unknown autofill: {kind}")

    value = request.GET.get('value', '')
    try:
        lookups = LookupCache().get_many(AUTOFILL_LOOKUPS[kind])
    except JoinError as e:
        return JsonResponse({'status': {'message': e.message}}, status=502)

    if kind == 'city':
        patch = resolve_city(value, lookups['cities'], lookups['provinces'], lookups['countries'])
    elif kind == 'province':
        patch = resolve_province(value, lookups['provinces'], lookups['countries'])
    elif kind == 'channel':
        patch = resolve_channel(value, lookups['channels'], request.GET.get('SKUCode', ''))
    else:
        patch = resolve_product(value, lookups['products'])
    return JsonResponse(patch)
