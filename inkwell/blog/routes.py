"""
Blog Routes

Pages for reading and writing posts. Anonymous access to /blogs, /post,
/user and /update is stopped earlier by the authorization guard.
"""

from flask import render_template, request, redirect, url_for
from flask_login import current_user
from inkwell.blog import blog_bp
from inkwell.errors import NotFound, Forbidden
from inkwell.services import posts
from inkwell.utils import plain_text


@blog_bp.route('/')
def index():
    """Landing page"""
    return render_template('index.html')


@blog_bp.route('/blogs')
def blogs():
    """All posts"""
    return render_template('blog/blogs.html', blogs=posts.list_posts())


@blog_bp.route('/post', methods=['GET', 'POST'])
def post():
    """Compose and publish a post"""
    if request.method == 'POST':
        posts.create_post(
            current_user,
            request.form.get('title', ''),
            request.form.get('content', ''),
        )
        return redirect(url_for('blog.blogs'))
    
    return render_template('blog/post.html')


@blog_bp.route('/user/<user_id>')
def user_profile(user_id):
    """Author profile with everything they have written"""
    try:
        user, user_posts = posts.get_user_profile(user_id)
    except NotFound as e:
        return plain_text(e.message)
    
    return render_template('blog/user.html', user=user, blogs=user_posts)


@blog_bp.route('/blog/<post_id>')
def blog_detail(post_id):
    """Single post. Public, unlike the listing."""
    try:
        blog = posts.get_post(post_id)
    except NotFound as e:
        return plain_text(e.message)
    
    return render_template('blog/blog.html', blog=blog)


@blog_bp.route('/update/<post_id>', methods=['GET', 'POST'])
def update(post_id):
    """Edit form and edit submission, both limited to the post's author.

    On POST the ``blogId`` form field names the post to edit and wins over
    the URL id; ownership is checked against that post.
    """
    if request.method == 'POST':
        # The form echoes the id back; fall back to the URL when it does not
        blog_id = request.form.get('blogId') or post_id
        try:
            posts.apply_update(
                current_user,
                blog_id,
                request.form.get('title', ''),
                request.form.get('content', ''),
            )
        except (NotFound, Forbidden) as e:
            return plain_text(e.message)
        return redirect(url_for('blog.index'))
    
    try:
        blog = posts.prepare_update(current_user, post_id)
    except (NotFound, Forbidden) as e:
        return plain_text(e.message)
    
    return render_template('blog/update.html', blog=blog)
