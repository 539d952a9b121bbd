"""
Auth Routes

Registration, login and logout using Flask-Login.
"""

from flask import render_template, request, redirect, url_for, flash
from flask_login import login_user, logout_user, current_user
from inkwell.auth import auth_bp
from inkwell.errors import UsernameTaken, EmailTaken, UnknownUsername, InvalidPassword
from inkwell.services import accounts


@auth_bp.route('/register', methods=['GET', 'POST'])
def register():
    """User registration route"""
    if request.method == 'POST':
        name = request.form.get('name', '')
        email = request.form.get('email', '')
        username = request.form.get('username', '')
        password = request.form.get('password', '')
        
        try:
            accounts.register(name, email, username, password)
        except (UsernameTaken, EmailTaken) as e:
            return render_template('auth/register.html', error=e.message)
        
        flash('Registration successful! Please login.', 'success')
        return redirect(url_for('auth.login'))
    
    return render_template('auth/register.html', error=None)


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """User login route"""
    if request.method == 'POST':
        username = request.form.get('username', '')
        password = request.form.get('password', '')
        
        try:
            user = accounts.login(username, password)
        except (UnknownUsername, InvalidPassword) as e:
            return render_template('auth/login.html', error=e.message)
        
        login_user(user)
        flash(f'Welcome back, {user.username}!', 'success')
        return redirect(url_for('blog.index'))
    
    return render_template('auth/login.html', error=None)


@auth_bp.route('/logout')
def logout():
    """User logout route"""
    if current_user.is_authenticated:
        logout_user()
        flash('You have been logged out successfully.', 'info')
    return redirect(url_for('blog.index'))
